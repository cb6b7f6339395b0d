import os
import urllib.parse


def get_settings_module() -> str:
    # APP_ENV picks the settings module; defaults to development.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def build_database_uri(*, user: str, password: str, host: str, port: int, name: str) -> str:
    # Quote the password so characters like "@" survive in the URL.
    encoded_password = urllib.parse.quote_plus(password)
    return f"mysql+mysqlconnector://{user}:{encoded_password}@{host}:{port}/{name}"
