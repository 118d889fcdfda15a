from typing import Annotated, Any

from pydantic import BeforeValidator
from pydantic_settings import BaseSettings, SettingsConfigDict


def parse_cors(v: Any) -> list[str] | str:
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip() for i in v.split(",") if i.strip()]
    elif isinstance(v, list | str):
        return v
    raise ValueError(v)


class Settings(BaseSettings):
    """Configuración de la aplicación leída de las variables de entorno y de .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    DATABASE_URL: str = "sqlite:///./restaurant.db"
    SQL_ECHO: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: Annotated[list[str] | str, BeforeValidator(parse_cors)] = ["*"]

    # Si es True, una reserva "finished" no puede volver a sentarse
    REJECT_FINISHED_RESERVATIONS: bool = False

    PORT: int = 10000


settings = Settings()
