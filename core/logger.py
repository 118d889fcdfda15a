import logging

from core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = settings.LOG_LEVEL) -> None:
    """Configura el logging raíz una sola vez para toda la API."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
