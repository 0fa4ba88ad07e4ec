import os

STORE_CONFIG = {
    "url": os.getenv("STORE_URL", "http://localhost:54321"),
    "api_key": os.getenv("STORE_API_KEY", ""),
    "schema": os.getenv("STORE_SCHEMA", "public"),
    "timeout_seconds": float(os.getenv("STORE_TIMEOUT_SECONDS", "30")),
}

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
