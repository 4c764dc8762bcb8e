from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    # "json" answers with a TransferResponse, "text" with a fixed message
    response_mode: Literal["json", "text"] = "json"

    RATE_LIMIT_ENABLED: bool = False
    RATE_LIMIT: str = "60/minute"

setting = Settings()
