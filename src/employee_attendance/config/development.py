import os

JWT_SECRET = os.getenv("JWT_SECRET")

STORE = os.getenv("STORE", "mysql")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD"),
    "database": os.getenv("DB_NAME", "attendance"),
}

PORT = int(os.getenv("PORT", "5000"))

ADMIN_EMPLOYEE_ID = os.getenv("ADMIN_EMPLOYEE_ID", "admin1")
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
