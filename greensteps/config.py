import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///:memory:")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:5173")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

    # Single-user deployment
    DEFAULT_USER_ID = int(os.getenv("DEFAULT_USER_ID", 1))
    RECENT_WINDOW = int(os.getenv("RECENT_WINDOW", 10))

    DEFAULT_ELECTRICITY_UNIT = os.getenv("DEFAULT_ELECTRICITY_UNIT", "kWh")
    DEFAULT_WATER_UNIT = os.getenv("DEFAULT_WATER_UNIT", "L")

    SEED_SAMPLE_ENTRIES = _env_flag("SEED_SAMPLE_ENTRIES", True)


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    LOG_LEVEL = "WARNING"
    SEED_SAMPLE_ENTRIES = False
