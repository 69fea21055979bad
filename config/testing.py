SECRET_KEY = "test-secret"

STORE_BACKEND = "memory"
DB_CONFIG = None

DEBUG = False
TESTING = True

AUTO_INIT_DB = False

ATTENDANCE_TIMEZONE = "UTC"
DISCONNECTION_THRESHOLD = 2
REGULARIZATION_WINDOW_DAYS = 30

LOG_LEVEL = "WARNING"
LOG_JSON = False

EMPLOYEES = [
    {"id": "1", "full_name": "John Employee", "email": "john@company.com", "role": "employee", "leave_balance": 15},
    {"id": "2", "full_name": "Sarah Admin", "email": "sarah@company.com", "role": "admin", "leave_balance": 20},
    {"id": "3", "full_name": "Mike Developer", "email": "mike@company.com", "role": "employee", "leave_balance": 12},
]
