SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "employee_tracker_test",
}

SQLALCHEMY_DATABASE_URI = "sqlite://"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

MAX_CONTENT_LENGTH = 50 * 1024 * 1024

BREAK_WARNING_MINUTES = 30

AUTO_INIT_DB = True
AUTO_SEED_DB = False
