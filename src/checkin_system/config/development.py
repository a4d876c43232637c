import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# memory | file | mysql
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")
DATA_FILE = os.getenv("DATA_FILE", "instance/checkin_store.json")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "checkin_db"),
}

PROFESSOR_USERNAME = os.getenv("PROFESSOR_USERNAME", "professor")
PROFESSOR_PASSWORD = os.getenv("PROFESSOR_PASSWORD", "2020")
PROFESSOR_PASSWORD_HASH = os.getenv("PROFESSOR_PASSWORD_HASH", "")

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_DIR = os.getenv("LOG_DIR", "")

# If enabled and STORAGE_BACKEND=mysql, create database/table on startup (idempotent)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
