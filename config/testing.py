SECRET_KEY = "test-secret"

# One in-memory database per app instance.
SQLALCHEMY_DATABASE_URI = "sqlite://"
SQLALCHEMY_TRACK_MODIFICATIONS = False

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = True
AUTO_SEED_DB = False
