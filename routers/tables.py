from typing import Annotated

from fastapi import APIRouter, Depends, status

# Importar dependencias del core
from core.database import SessionDep
from repositories.table_store import SqlTableStore
from schemas.tables_schema import (
    SeatingResponse,
    TableListResponse,
    TableRequest,
    TableResponse,
)
from services.table_assignment import TableAssignmentService

router = APIRouter(prefix="/api/tables", tags=["Mesas"])


def get_table_service(session: SessionDep) -> TableAssignmentService:
    """Construye el servicio de asignación sobre la sesión de la petición."""
    return TableAssignmentService(SqlTableStore(session))


TableServiceDep = Annotated[TableAssignmentService, Depends(get_table_service)]


# ======================================================================
# GET /api/tables - Listar mesas ordenadas por nombre
# ======================================================================
@router.get("", response_model=TableListResponse, summary="Listar mesas")
def list_tables(service: TableServiceDep):
    return {"data": service.list()}


# ======================================================================
# POST /api/tables - Crear nueva mesa
# ======================================================================
@router.post("", response_model=TableResponse, status_code=status.HTTP_201_CREATED, summary="Crear una nueva mesa")
def create_table(body: TableRequest, service: TableServiceDep):
    return {"data": service.create(body.data)}


# ======================================================================
# GET /api/tables/{table_id} - Obtener mesa por ID
# ======================================================================
@router.get("/{table_id}", response_model=TableResponse, summary="Obtener detalles de una mesa por ID")
def read_table(table_id: int, service: TableServiceDep):
    return {"data": service.read(table_id)}


# ======================================================================
# PUT /api/tables/{table_id}/seat - Sentar una reserva en la mesa
# ======================================================================
@router.put("/{table_id}/seat", response_model=SeatingResponse, summary="Sentar una reserva en la mesa")
def seat_reservation(table_id: int, body: TableRequest, service: TableServiceDep):
    table, reservation = service.seat_reservation(table_id, body.data)
    return {"data": {"table": table, "reservation": reservation}}


# ======================================================================
# DELETE /api/tables/{table_id}/seat - Liberar la mesa y terminar la reserva
# ======================================================================
@router.delete("/{table_id}/seat", response_model=SeatingResponse, summary="Liberar la mesa")
def finish_reservation(table_id: int, service: TableServiceDep):
    table, reservation = service.finish_reservation(table_id)
    return {"data": {"table": table, "reservation": reservation}}
