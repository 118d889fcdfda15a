from typing import Optional

from fastapi import status


class TableServiceError(Exception):
    """Error base de la API: lleva el código HTTP y el mensaje para el cliente."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"status": self.status_code, "message": self.message}


class MissingFieldError(TableServiceError):
    """Falta un campo obligatorio en el cuerpo de la petición."""

    def __init__(self, field: str, resource: str = "Table"):
        self.field = field
        super().__init__(f"{resource} must include a {field}")


class InvalidValueError(TableServiceError):
    """Un campo existe pero su valor no es válido."""


class NotFoundError(TableServiceError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str, resource_id):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} {resource_id} cannot be found.")


class ConflictError(TableServiceError):
    """Violación de ocupación, capacidad o estado de la reserva."""


class PersistenceError(TableServiceError):
    """La escritura conjunta mesa/reserva falló y se revirtió."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
