from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    APP_NAME: str = "Campus Spaces API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Registers the sample space on startup
    SEED_MOCK_DATA: bool = True

    QR_BOX_SIZE: int = 10
    QR_BORDER: int = 4
    QR_IMAGE_FORMAT: str = "png"

    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
