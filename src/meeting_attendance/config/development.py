import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "meeting_attendance"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

QUERY_CACHE_ENABLED = bool(int(os.getenv("QUERY_CACHE_ENABLED", "1")))
# Product decision: events a member was never marked for count as unjustified absences.
COUNT_UNMARKED_AS_ABSENT = bool(int(os.getenv("COUNT_UNMARKED_AS_ABSENT", "1")))
