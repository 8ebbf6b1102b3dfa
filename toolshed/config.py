import os

server_mode = os.getenv("SERVER_MODE", "development")
"""The operational mode of the server."""

api_root = "/api/v1"
"""The base url for the api."""

database_url = os.getenv("DATABASE_URL", "sqlite://db.sqlite3")
"""The tortoise connection string for the database store."""

store_backend = os.getenv("TOOL_STORE", "database")
"""Which store to persist tools in (either "database" or "memory")."""

sentry_dsn = os.getenv("SENTRY_DSN", None)
"""The sentry DSN. Exceptions are only reported when this is set."""

port = int(os.getenv("PORT", "8080"))
"""The port to serve the api on."""
