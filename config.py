import os
from dotenv import load_dotenv
from pathlib import Path


env_path = Path(".") / ".env"
load_dotenv(dotenv_path=env_path)


def _split_csv(value):
    return tuple(item.strip().upper() for item in value.split(",") if item.strip())


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "secret_key")
    JWT_ALGORITHM = os.environ.get("JWT_ALGORITHM", "HS256")

    HOST = os.environ.get("HOST", "127.0.0.1")
    PORT = int(os.environ.get("PORT", 5000))

    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    # Regions tried for phone numbers given without a leading "+"
    PHONE_REGIONS = _split_csv(os.environ.get("PHONE_REGIONS", "US,GB,NG"))

    # Logging
    LOG_DIR = os.environ.get("LOG_DIR", "logs")
    LOG_TO_FILE = os.environ.get("LOG_TO_FILE", "True").lower() == "true"
    LOG_MAX_BYTES = int(os.environ.get("LOG_MAX_BYTES", 10 * 1024 * 1024))  # 10MB
    LOG_BACKUP_COUNT = int(os.environ.get("LOG_BACKUP_COUNT", 5))
