"""
Application constants to avoid hardcoded values.

Following Clean Code principle: "Stop Hardcoding Values"
"""

from datetime import datetime

# API Configuration
API_TITLE = "Media Catalog API"
API_VERSION = "1.0.0"
API_DESCRIPTION = """
A REST API for a personal media catalog.

## Features

* **Movies, Games, Programs, Genres, Pictures**: independent ordered collections
* **Shows**: shows with seasons and episodes
* **Music**: albums with songs
* **Books**: book categories with books
* **Ordering**: move up/down, duplicate and reindex positions of every item

## Usage

1. Add items with `POST /<kind>/add`
2. Reorder them with `POST /<kind>/moveUp` and `POST /<kind>/moveDown`
3. Compact positions with `POST /<kind>/updatePositions`

Every mutating endpoint returns a result with the full list of validation events.
"""

# Server Configuration
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000
DEFAULT_LOG_LEVEL = "info"

# API Messages
API_STATUS_RUNNING = "running"
API_STATUS_HEALTHY = "healthy"
API_MESSAGE_ROOT = "Media Catalog API"

# Validation Limits
MIN_YEAR = 1930
CURRENT_YEAR = datetime.now().year
MAX_IMDB_CODE = 9999999
NO_IMDB_CODE = -1

# Result Keys and Messages
ERROR_ID_NULL = "ID_NULL"
MESSAGE_ID_NULL = "ID mustn't be null."
SUFFIX_NULL = "_NULL"
SUFFIX_ID_NULL = "_ID_NULL"
SUFFIX_ID_NOT_NULL = "_ID_NOT_NULL"
SUFFIX_NOT_EXIST = "_NOT_EXIST"
SUFFIX_NOT_MOVABLE = "_NOT_MOVABLE"

# Internal Consistency Messages
ERROR_UNKNOWN_PARENT = "Unknown parent with ID {entity_id} for {kind}."
ERROR_UNKNOWN_CHILD = "Unknown {kind} with ID {entity_id}."
ERROR_ID_NOT_GENERATED = "Repository didn't generate ID for {kind}."

# Application Lifecycle Messages
STARTUP_MESSAGE = "Media Catalog API starting up..."
SHUTDOWN_MESSAGE = "Media Catalog API shutting down..."
SERVER_START_MESSAGE = "Starting Media Catalog API"
LOADING_DATA_MESSAGE = "Loading catalog snapshot..."
SAVING_DATA_MESSAGE = "Saving catalog snapshot..."

# File Paths
SNAPSHOT_PREFIX = "catalog_"
SNAPSHOT_SUFFIX = ".json"
SNAPSHOT_VERSION = "1.0"

# CORS Configuration (Development - restrict in production)
CORS_ALLOW_ORIGINS = ["*"]
CORS_ALLOW_CREDENTIALS = True
CORS_ALLOW_METHODS = ["*"]
CORS_ALLOW_HEADERS = ["*"]

# Environment Variable Names
ENV_HOST = "HOST"
ENV_PORT = "PORT"
ENV_DATA_DIR = "DATA_DIR"
ENV_LOG_LEVEL = "LOG_LEVEL"

# Contact Information
CONTACT_NAME = "Media Catalog API"

# HTTP Endpoints
ENDPOINT_ROOT = "/"
ENDPOINT_HEALTH = "/health"
ENDPOINT_DOCS = "/docs"
ENDPOINT_STATISTICS = "/statistics"

# Logging Configuration
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
