from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_title: str = "Productos API"
    app_version: str = "1.0.0"
    debug: bool = False

    cors_allow_origins: List[str] = []
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8000

    # módulo con register_handlers(dispatcher), p.ej. "mi_paquete.handlers"
    handlers_module: Optional[str] = None


settings = Settings()
