import os


def get_settings_module() -> str:
    # Environment is chosen by APP_ENV, defaulting to 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "time_ledger.config.production"

    if env in {"test", "testing"}:
        return "time_ledger.config.testing"

    return "time_ledger.config.development"
