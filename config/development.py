import os

from config import build_database_uri

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL") or build_database_uri(
    user=os.getenv("DB_USER", "root"),
    password=os.getenv("DB_PASSWORD", "root"),
    host=os.getenv("DB_HOST", "localhost"),
    port=int(os.getenv("DB_PORT", "3306")),
    name=os.getenv("DB_NAME", "minhasfinancas"),
)
SQLALCHEMY_TRACK_MODIFICATIONS = False

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, tables are created on startup (idempotent: create_all)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
