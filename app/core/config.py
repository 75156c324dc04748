from typing import List

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    access_token_expire_days: int = 7

    # Параметры таблицы документов
    page_size: int = 20
    search_result_limit: int = 10

    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    model_config = {"env_file": ".env", "extra": "ignore"}

settings = Settings()
