from os import getenv


def _flag(name: str, default: str) -> bool:
    return getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    APP_NAME = getenv("APP_NAME", "Worklog API")
    DATABASE_URL = getenv("DATABASE_URL", "sqlite:///./data/worklog.db")
    LOG_LEVEL = getenv("LOG_LEVEL", "INFO")
    REQUEST_LOG = _flag("REQUEST_LOG", "true")
    SEED_DEFAULTS = _flag("SEED_DEFAULTS", "true")
    DAILY_TARGET_HOURS = float(getenv("DAILY_TARGET_HOURS", "8"))  # seuil "journée complète"

settings = Settings()
