import logging
from typing import Annotated

from fastapi import Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, create_engine, Session

from core.config import settings

logger = logging.getLogger(__name__)

# SQLite necesita compartir la conexión entre los hilos del threadpool de FastAPI
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

# El motor de la base de datos
engine = create_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO, connect_args=connect_args)


def create_db_and_tables(bind=None):
    """Crea todas las tablas definidas en los modelos si no existen."""
    # Importar TODOS los modelos aquí para registrarlos en el metadata
    from models.reservations import Reservation
    from models.tables import Table

    SQLModel.metadata.create_all(bind or engine)


def get_session():
    """Generador para obtener la sesión de la base de datos."""
    with Session(engine) as session:
        yield session


SessionDep = Annotated[Session, Depends(get_session)]


def ping_database(engine) -> bool:
    """
    Intenta una consulta simple para despertar la base de datos,
    útil para servicios que hibernan entre peticiones.
    """
    logger.info("Intentando 'ping' a la base de datos...")
    try:
        with Session(engine) as session:
            session.execute(text("SELECT 1"))
        logger.info("Ping exitoso: conexión establecida.")
        return True
    except SQLAlchemyError as e:
        logger.warning("Fallo el ping a la base de datos: %s", e)
        return False
