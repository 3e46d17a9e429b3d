from pydantic_settings import BaseSettings
from typing import List
import os


class Settings(BaseSettings):
    log_level: str = "INFO"
    environment: str = "local"
    api_prefix: str = ""
    host: str = "0.0.0.0"
    port: int = 8000
    # JSON array in the environment, e.g. CORS_ORIGINS='["https://example.com"]'
    cors_origins: List[str] = ["*"]

    # Logging control
    request_logging: bool = True

    @property
    def docs_enabled(self) -> bool:
        return self.environment == "local"

    class Config:
        env_file = f"config/{os.getenv('ENV', 'local')}.env"
        case_sensitive = False


settings = Settings()
