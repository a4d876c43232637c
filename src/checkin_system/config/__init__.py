import os


def get_settings_module() -> str:
    # APP_ENV selects the settings module; development is the default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "checkin_system.config.production"

    if env in {"test", "testing"}:
        return "checkin_system.config.testing"

    return "checkin_system.config.development"
