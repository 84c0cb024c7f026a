import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "meeting_attendance"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

# Disable when running several worker processes: each keeps its own cache.
QUERY_CACHE_ENABLED = bool(int(os.getenv("QUERY_CACHE_ENABLED", "0")))
COUNT_UNMARKED_AS_ABSENT = bool(int(os.getenv("COUNT_UNMARKED_AS_ABSENT", "1")))
