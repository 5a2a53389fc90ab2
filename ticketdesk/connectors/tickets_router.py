from typing import Annotated, List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..handlers.tickets import STORE_UNAVAILABLE_MESSAGE, TicketHandler
from ..storage.models import Ticket

router = APIRouter(prefix="/tickets", tags=["tickets"])


class TicketCreateRequest(BaseModel):
    # opcionales aquí: la validación de obligatorios la hace el handler
    title: str | None = Field(default=None, json_schema_extra={"example": "Fix login bug"})
    description: str | None = Field(
        default=None,
        json_schema_extra={"example": "Users are unable to login with special characters"},
    )


class ErrorResponse(BaseModel):
    error: str


class TicketHandlerUnavailable(Exception):
    """La app no tiene un TicketHandler configurado en app.state."""


STORE_UNAVAILABLE_RESPONSE = {503: {"model": ErrorResponse, "description": "Ticket store unavailable"}}


async def handler_unavailable(request: Request, exc: TicketHandlerUnavailable) -> JSONResponse:
    return JSONResponse(status_code=503, content={"error": STORE_UNAVAILABLE_MESSAGE})


def get_ticket_handler(request: Request) -> TicketHandler:
    handler = getattr(request.app.state, "ticket_handler", None)
    if handler is None:
        raise TicketHandlerUnavailable()
    return handler


TicketHandlerDep = Annotated[TicketHandler, Depends(get_ticket_handler)]


@router.post(
    "",
    summary="Create a new ticket",
    status_code=201,
    response_model=Ticket,
    responses={
        400: {"model": ErrorResponse, "description": "Bad request - missing required fields"},
        **STORE_UNAVAILABLE_RESPONSE,
    },
)
def create_ticket(handler: TicketHandlerDep, payload: TicketCreateRequest | None = None):
    """Crea un ticket con título y descripción."""
    body = payload.model_dump() if payload is not None else None
    status_code, content = handler.create_ticket(body)
    return JSONResponse(status_code=status_code, content=content)


@router.get("", summary="Get all tickets", response_model=List[Ticket], responses=STORE_UNAVAILABLE_RESPONSE)
def list_tickets(handler: TicketHandlerDep):
    status_code, content = handler.list_tickets()
    return JSONResponse(status_code=status_code, content=content)
