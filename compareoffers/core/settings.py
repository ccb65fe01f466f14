# compareoffers/core/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "compareoffers"

    # --- Comparison defaults ---
    DEFAULT_PRICE: float = 38
    DEFAULT_PRINT_RUNS: str = "1000,2000,4000,8000,12000,20000,50000,100000"

    # --- Logging ---
    LOG_LEVEL: str = "WARNING"
    LOG_JSON: bool = False

    model_config = SettingsConfigDict(
        env_prefix="COMPAREOFFERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()  # leest .env
