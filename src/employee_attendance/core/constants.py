"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_ADMIN_EMPLOYEE_ID = "admin1"
DEFAULT_TOKEN_TTL_SECONDS = 60 * 60
DEFAULT_PORT = 5000
DEFAULT_CORS_ORIGINS = "http://localhost:3000"
JWT_ALGORITHM = "HS256"

# MySQL error code for a duplicate key on INSERT
MYSQL_DUPLICATE_ENTRY = 1062

ALREADY_MARKED_MESSAGE = "Attendance already marked for today"
