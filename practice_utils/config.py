from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Runtime settings, read from PRACTICE_UTILS_* environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="PRACTICE_UTILS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Simulated latency of fetch_data, in seconds
    fetch_delay_seconds: float = Field(default=0.0, ge=0)


settings = Settings()
