import os

SECRET_KEY = os.environ["SECRET_KEY"]

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "employee_tracker"),
}

SQLALCHEMY_DATABASE_URI = os.getenv(
    "DATABASE_URL",
    "mysql+mysqlconnector://{user}:{password}@{host}:{port}/{database}".format(**DB_CONFIG),
)
SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True, "pool_recycle": 280}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

MAX_CONTENT_LENGTH = 50 * 1024 * 1024

BREAK_WARNING_MINUTES = int(os.getenv("BREAK_WARNING_MINUTES", "30"))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = False
