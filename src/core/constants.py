"""
Application constants to avoid hardcoded values.

Following Clean Code principle: "Stop Hardcoding Values"
"""

# API Configuration
API_TITLE = "Notebook API"
API_VERSION = "1.0.0"
API_DESCRIPTION = """
A REST API for storing notes in MongoDB.

## Features

* **Notes**: Create, read, update and delete notes
* **Search**: Find notes by body text, update time and header image size
* **Indexes**: Compound index on owning user and body
* **System**: Seed the collection with sample notes

## Usage

1. Call `/api/system/init` to create the index and a few sample notes
2. Manage notes through `/api/notes`
"""

# Server Configuration
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000
DEFAULT_LOG_LEVEL = "info"

# Database Configuration
DEFAULT_CONNECTION_STRING = "mongodb://localhost:27017"
DEFAULT_DATABASE_NAME = "NotesDb"
NOTES_COLLECTION_NAME = "Note"
DEFAULT_SERVER_SELECTION_TIMEOUT_MS = 5000

# Pagination Configuration
DEFAULT_PAGE_LIMIT = 25
MAX_PAGE_LIMIT = 100
DEFAULT_PAGE_OFFSET = 0

# API Messages
API_STATUS_RUNNING = "running"
API_STATUS_HEALTHY = "healthy"
API_STATUS_DEGRADED = "degraded"
API_MESSAGE_ROOT = "Notebook API"

# Document Field Names
FIELD_MONGO_ID = "_id"
FIELD_ID = "id"
FIELD_INTERNAL_ID = "internal_id"
FIELD_BODY = "body"
FIELD_UPDATED_ON = "updated_on"
FIELD_CREATED_ON = "created_on"
FIELD_USER_ID = "user_id"
FIELD_HEADER_IMAGE_SIZE = "header_image.image_size"

# Sample Data
SAMPLE_NOTES = [
    ("1", "Test note 1", 1),
    ("2", "Test note 2", 1),
    ("3", "Test note 3", 2),
    ("4", "Test note 4", 2),
]

# Error Messages
ERROR_NOTE_NOT_FOUND = "Note not found"

# Success Messages
SUCCESS_SAMPLE_DATA_CREATED = (
    "Database {database} was created, and collection '{collection}' "
    "was filled with {count} sample items (index: {index_name})"
)

# Application Lifecycle Messages
STARTUP_MESSAGE = "Notebook API starting up..."
SHUTDOWN_MESSAGE = "Notebook API shutting down..."
SERVER_START_MESSAGE = "Starting Notebook API"

# CORS Configuration (Development - restrict in production)
CORS_ALLOW_ORIGINS = ["*"]
CORS_ALLOW_CREDENTIALS = True
CORS_ALLOW_METHODS = ["*"]
CORS_ALLOW_HEADERS = ["*"]

# Environment Variable Names
ENV_HOST = "HOST"
ENV_PORT = "PORT"
ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_CONNECTION_STRING = "MONGO_CONNECTION_STRING"
ENV_DATABASE_NAME = "MONGO_DATABASE"
ENV_SERVER_SELECTION_TIMEOUT_MS = "MONGO_SERVER_SELECTION_TIMEOUT_MS"

# Contact Information
CONTACT_NAME = "Notebook API"
CONTACT_URL = "https://github.com/your-repo/notebook-api"

# HTTP Endpoints
ENDPOINT_ROOT = "/"
ENDPOINT_HEALTH = "/health"
ENDPOINT_DOCS = "/docs"

# Logging Configuration
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
