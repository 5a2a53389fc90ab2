from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Tuple

from ..storage.repository import TicketRepository, TicketStoreError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Title and description are required fields"
STORE_UNAVAILABLE_MESSAGE = "Ticket store unavailable"

Response = Tuple[int, Any]


class TicketValidationError(ValueError):
    """Entrada inválida del cliente (campo obligatorio ausente o vacío)."""


def validate_create_payload(payload: Optional[Mapping[str, Any]]) -> Tuple[str, str]:
    """Devuelve (title, description) o lanza TicketValidationError.

    Ausente, None y "" se tratan igual.
    """
    payload = payload or {}
    title = payload.get("title")
    description = payload.get("description")
    if not title or not description:
        raise TicketValidationError(REQUIRED_FIELDS_MESSAGE)
    if not isinstance(title, str) or not isinstance(description, str):
        raise TicketValidationError("Title and description must be strings")
    return title, description


class TicketHandler:
    """Traduce las peticiones de crear/listar tickets a llamadas al repositorio.

    Cada método devuelve (status_code, body) listo para serializar.
    """

    def __init__(self, repo: TicketRepository):
        self.repo = repo

    def create_ticket(self, payload: Optional[Mapping[str, Any]]) -> Response:
        try:
            title, description = validate_create_payload(payload)
        except TicketValidationError as e:
            logger.info(f"Rejected ticket: {e}")
            return 400, {"error": str(e)}
        try:
            ticket = self.repo.create(title, description)
        except TicketStoreError:
            return 503, {"error": STORE_UNAVAILABLE_MESSAGE}
        return 201, ticket.to_json()

    def list_tickets(self) -> Response:
        try:
            tickets = self.repo.list_all()
        except TicketStoreError:
            return 503, {"error": STORE_UNAVAILABLE_MESSAGE}
        return 200, [t.to_json() for t in tickets]

    @staticmethod
    def health() -> Response:
        # no toca el repositorio
        return 200, {"status": "OK"}


__all__ = ["TicketHandler", "TicketValidationError", "validate_create_payload"]
