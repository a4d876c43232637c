SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"
DATA_FILE = ""

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "checkin_test",
}

PROFESSOR_USERNAME = "professor"
PROFESSOR_PASSWORD = "2020"
PROFESSOR_PASSWORD_HASH = ""

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
LOG_DIR = ""

AUTO_INIT_DB = False
