# cosmic_social/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    PROJECT_NAME: str = "Cosmic Social"
    PROJECT_VERSION: str = "1.0.0"
    API_BASE_URL: str
    API_TIMEOUT_SECONDS: float = 10.0
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="allow")
