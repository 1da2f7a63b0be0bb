"""
HTTP layer for the Notebook API.

Routers and FastAPI dependencies.
"""
