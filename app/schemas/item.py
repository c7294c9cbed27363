"""Item request/response schemas - REST API contract."""

from datetime import datetime

from pydantic import Field

from app.schemas.base import ApiModel

# Bounds of the storage columns: a 32-bit INTEGER quantity, VARCHAR name and sku
QUANTITY_MIN = -(2**31)
QUANTITY_MAX = 2**31 - 1
NAME_MAX_LENGTH = 255
SKU_MAX_LENGTH = 128


class ItemCreate(ApiModel):
    inventory_id: str | None = None
    name: str | None = Field(None, max_length=NAME_MAX_LENGTH)
    sku: str | None = Field(None, max_length=SKU_MAX_LENGTH)
    quantity: int | None = Field(None, ge=QUANTITY_MIN, le=QUANTITY_MAX)
    price: float | None = Field(None, allow_inf_nan=False)


class ItemUpdate(ApiModel):
    name: str | None = Field(None, max_length=NAME_MAX_LENGTH)
    sku: str | None = Field(None, max_length=SKU_MAX_LENGTH)
    quantity: int | None = Field(None, ge=QUANTITY_MIN, le=QUANTITY_MAX)
    price: float | None = Field(None, allow_inf_nan=False)


class ItemResponse(ApiModel):
    id: str
    inventory_id: str
    name: str
    sku: str
    quantity: int
    price: float
    created_at: datetime
    updated_at: datetime
