"""
Application constants to avoid hardcoded values.

Following Clean Code principle: "Stop Hardcoding Values"
"""

# API Configuration
API_TITLE = "Books API"
API_VERSION = "1.0.0"
API_DESCRIPTION = """
A minimal REST API backed by a process-local, in-memory book repository.

## Features

* **Health**: Liveness check for monitoring
* **Books**: Create books with unique titles

Books are kept in memory only and are lost when the process exits.
"""

# Server Configuration
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8090
DEFAULT_LOG_LEVEL = "debug"

# API Messages
API_MESSAGE_ROOT = "Books API is running!!!"
API_STATUS_UP = "UP"

# HTTP Status Codes
HTTP_422_BOOK_CONFLICT = 422

# Error Messages
ERROR_INVALID_PARAMS = "Invalid params"
ERROR_INVALID_REQUEST_BODY = "Invalid request body"
ERROR_BOOK_ALREADY_EXISTS = "Book already exists"
ERROR_INTERNAL_SERVER = "Internal server error"

# Application Lifecycle Messages
STARTUP_MESSAGE = "📚 Books API starting up..."
SHUTDOWN_MESSAGE = "💤 Books API shutting down..."
SERVER_START_MESSAGE = "🌟 Starting Books API"

# Environment Variable Names
ENV_HOST = "HOST"
ENV_PORT = "PORT"
ENV_LOG_LEVEL = "LOG_LEVEL"

# HTTP Endpoints
API_PREFIX = "/api"
ENDPOINT_ROOT = "/"
ENDPOINT_HEALTH = "/health"
ENDPOINT_BOOKS = "/books"

# Logging Configuration
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_LEVELS = ("debug", "info", "warning", "error", "critical")
