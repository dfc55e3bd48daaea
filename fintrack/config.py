"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "fintrack-calculators"
    log_level: str = "INFO"

    # Currency applied when a request carries none
    default_currency: str = "INR"

    # Calculators
    payoff_iteration_cap: int = 1000  # months


settings = Settings()
