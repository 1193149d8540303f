from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # App
    LOG_LEVEL: str = "WARNING"

    # Pair limit for algorithms without a dedicated parameter type
    MAX_PARAMS: int = 16


settings = Settings()
