import os

JWT_SECRET = os.getenv("JWT_SECRET")

STORE = os.getenv("STORE", "memory")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD"),
    "database": os.getenv("DB_NAME", "attendance_test"),
}

ADMIN_EMPLOYEE_ID = "admin1"

DEBUG = False
TESTING = True
LOG_LEVEL = "DEBUG"

AUTO_INIT_DB = False
