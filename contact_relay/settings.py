from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, extra="ignore")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    host: str = "0.0.0.0"  # noqa: S104
    port: int = 8080

    debug_endpoints: bool = True

    static_dir: str = "static"
    templates_dir: str = "templates"
    index_template: str = "index.html"

    smtp_server: str = ""
    smtp_port: int | None = None
    smtp_email: str = ""
    smtp_password: str = ""
    smtp_connect_timeout: float = 10
    smtp_probe_timeout: float = 5


settings = Settings()
