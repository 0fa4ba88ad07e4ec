import os

STORE_CONFIG = {
    "url": os.getenv("STORE_URL", "http://store.test"),
    "api_key": os.getenv("STORE_API_KEY", "test-key"),
    "schema": "public",
    "timeout_seconds": 5.0,
}

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
