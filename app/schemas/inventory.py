"""Inventory request/response schemas - REST API contract."""

from datetime import datetime

from pydantic import Field

from app.schemas.base import ApiModel

NAME_MAX_LENGTH = 255


class InventoryCreate(ApiModel):
    # Presence and blankness are checked by the service so the error is a 400 with a clear message
    name: str | None = Field(None, max_length=NAME_MAX_LENGTH)
    description: str | None = None


class InventoryUpdate(ApiModel):
    name: str | None = Field(None, max_length=NAME_MAX_LENGTH)
    description: str | None = None


class InventoryResponse(ApiModel):
    id: str
    name: str
    description: str
    owner_id: str
    created_at: datetime
    updated_at: datetime
