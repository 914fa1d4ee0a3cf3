import os

def get_settings_module() -> str:
    # Only logging differs between environments; the payroll itself never reads settings.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"
