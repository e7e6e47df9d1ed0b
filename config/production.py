import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "farmacia_nomina"),
}

EXCHANGE_RATE_URL = os.getenv("EXCHANGE_RATE_URL", "https://ve.dolarapi.com/v1/dolares/oficial")
EXCHANGE_RATE_TIMEOUT = float(os.getenv("EXCHANGE_RATE_TIMEOUT", "10"))
FALLBACK_EXCHANGE_RATE = float(os.getenv("FALLBACK_EXCHANGE_RATE", "36.5"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
