from pathlib import Path

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent.parent.parent

FIFTY_MEGABYTES = 50 * 1024 * 1024


class Settings(BaseSettings):
    APP_NAME: str = "PDF Extraction Service"

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 4000
    MAX_BODY_BYTES: int = FIFTY_MEGABYTES
    CORS_ORIGINS: list[str] = ["*"]

    # Remote PDF download
    FETCH_TIMEOUT_SECONDS: float = 20.0
    FETCH_CHUNK_SIZE: int = 64 * 1024
    # Unset means no cap beyond what the remote serves
    MAX_PDF_BYTES: int | None = None

    # Pages whose trimmed text is shorter than this are flagged for OCR
    OCR_MIN_TEXT_LENGTH: int = 10

    LOG_LEVEL: str = "INFO"

    model_config = {
        "env_file": BASE_DIR / ".env",
        "extra": "ignore",
    }


settings = Settings()
