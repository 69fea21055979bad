import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# "memory" keeps everything in-process; "mysql" uses DB_CONFIG
STORE_BACKEND = os.getenv("STORE_BACKEND", "memory")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_portal"),
}

DEBUG = True

# If enabled (mysql backend), the key-value tables are created on startup
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

ATTENDANCE_TIMEZONE = os.getenv("ATTENDANCE_TIMEZONE", "UTC")
DISCONNECTION_THRESHOLD = int(os.getenv("DISCONNECTION_THRESHOLD", "2"))
REGULARIZATION_WINDOW_DAYS = int(os.getenv("REGULARIZATION_WINDOW_DAYS", "30"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_JSON = bool(int(os.getenv("LOG_JSON", "0")))

# Demo roster
EMPLOYEES = [
    {
        "id": "1",
        "full_name": "John Employee",
        "email": "john@company.com",
        "role": "employee",
        "department": "Engineering",
        "leave_balance": 15,
    },
    {
        "id": "2",
        "full_name": "Sarah Admin",
        "email": "sarah@company.com",
        "role": "admin",
        "department": "HR",
        "leave_balance": 20,
    },
    {
        "id": "3",
        "full_name": "Mike Developer",
        "email": "mike@company.com",
        "role": "employee",
        "department": "Engineering",
        "leave_balance": 12,
    },
]
