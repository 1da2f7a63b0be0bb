"""
Database connection settings.

Values come from environment variables, falling back to the defaults in
core.constants.
"""

import os

from pydantic import BaseModel, Field

from core.constants import (
    DEFAULT_CONNECTION_STRING,
    DEFAULT_DATABASE_NAME,
    DEFAULT_SERVER_SELECTION_TIMEOUT_MS,
    ENV_CONNECTION_STRING,
    ENV_DATABASE_NAME,
    ENV_SERVER_SELECTION_TIMEOUT_MS,
)


class Settings(BaseModel):
    """Connection settings for the notes database."""

    connection_string: str = Field(
        default=DEFAULT_CONNECTION_STRING,
        min_length=1,
        description="MongoDB connection string",
    )
    database: str = Field(
        default=DEFAULT_DATABASE_NAME,
        min_length=1,
        description="Name of the database holding the notes collection",
    )
    server_selection_timeout_ms: int = Field(
        default=DEFAULT_SERVER_SELECTION_TIMEOUT_MS,
        gt=0,
        description="How long an operation waits for a reachable server",
    )

    @classmethod
    def from_environment(cls) -> "Settings":
        """Build settings from environment variables."""
        return cls(
            connection_string=os.getenv(ENV_CONNECTION_STRING, DEFAULT_CONNECTION_STRING),
            database=os.getenv(ENV_DATABASE_NAME, DEFAULT_DATABASE_NAME),
            server_selection_timeout_ms=int(
                os.getenv(ENV_SERVER_SELECTION_TIMEOUT_MS, DEFAULT_SERVER_SELECTION_TIMEOUT_MS)
            ),
        )
