"""Environment-based configuration via pydantic-settings."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Server and engine settings, configurable via SCALER_* env vars."""

    model_config = {"env_prefix": "SCALER_"}

    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"
    preset: str | None = None
