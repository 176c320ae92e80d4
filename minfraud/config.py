"""Client configuration via environment variables."""

from pydantic_settings import BaseSettings

DEFAULT_HOST = "minfraud.maxmind.com"


class Settings(BaseSettings):
    account_id: int | None = None
    license_key: str | None = None

    host: str = DEFAULT_HOST
    port: int | None = None
    use_https: bool = True

    connect_timeout: float = 3.0
    read_timeout: float = 20.0

    locales: list[str] = ["en"]

    log_level: str = "INFO"
    log_format: str = "console"

    model_config = {"env_prefix": "MINFRAUD_", "env_file": ".env", "extra": "ignore"}
