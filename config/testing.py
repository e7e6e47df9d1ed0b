import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "farmacia_nomina_test"),
}

EXCHANGE_RATE_URL = "http://rates.invalid/v1/dolares/oficial"
EXCHANGE_RATE_TIMEOUT = 1.0
FALLBACK_EXCHANGE_RATE = 36.5

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
