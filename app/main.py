import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

# --- Importaciones de Módulos Core ---
from core.config import settings
from core.database import create_db_and_tables, engine, ping_database
from core.errors import TableServiceError
from core.logger import configure_logging

# --- Importación de Routers ---
from routers import reservations
from routers import tables

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="API Restaurante - Mesas y Reservas",
    version="1.0.0",
    description="Backend para la gestión de mesas y la asignación de reservas."
)


# --- Evento de Inicio ---
@app.on_event("startup")
def startup():
    """
    Función que se ejecuta al iniciar la aplicación.
    1. Crea las tablas.
    2. Realiza un 'ping' a la DB para despertar la conexión.
    """
    logger.info("Ejecutando startup hooks...")
    create_db_and_tables()
    logger.info("Tablas verificadas.")
    ping_database(engine)


# --- Manejo de Errores: {status, message} ---
@app.exception_handler(TableServiceError)
async def table_service_error_handler(request: Request, exc: TableServiceError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    logger.warning("[400 Validation Error] %s %s: %s", request.method, request.url.path, errors)
    message = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()) if part != 'body')}: {error.get('msg')}"
        for error in errors
    ) or "Invalid request"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"status": status.HTTP_400_BAD_REQUEST, "message": message},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Error inesperado en %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"status": status.HTTP_500_INTERNAL_SERVER_ERROR, "message": "Internal server error"},
    )


# --- Configuración de CORS ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Inclusión de Routers (Rutas de la API) ---
app.include_router(tables.router)
app.include_router(reservations.router)


# --- Ruta Raíz de Bienvenida ---
@app.get("/", tags=["API Health"])
def read_root():
    """Verifica que la API está en línea."""
    return {"message": "API de Restaurante en línea"}


# --- Ejecución Local ---
if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT, reload=True)
