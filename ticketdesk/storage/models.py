from __future__ import annotations

from datetime import datetime, timezone
import uuid

from pydantic import BaseModel, ConfigDict, Field


def utc_now_iso() -> str:
    """Hora actual en UTC, ISO-8601 con milisegundos y sufijo Z.

    Ej: "2025-11-17T10:30:00.000Z"
    """
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_ticket_id() -> str:
    return str(uuid.uuid4())


class Ticket(BaseModel):
    """Ticket persistido. Inmutable una vez creado.

    En JSON la fecha se expone como `createdAt`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(json_schema_extra={"example": "a1b2c3d4-e5f6-7890-abcd-ef1234567890"})
    title: str = Field(min_length=1, json_schema_extra={"example": "Fix login bug"})
    description: str = Field(
        min_length=1,
        json_schema_extra={"example": "Users are unable to login with special characters in password"},
    )
    created_at: str = Field(alias="createdAt", json_schema_extra={"example": "2025-11-17T10:30:00.000Z"})

    @classmethod
    def new(cls, title: str, description: str) -> "Ticket":
        return cls(id=new_ticket_id(), title=title, description=description, created_at=utc_now_iso())

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)
