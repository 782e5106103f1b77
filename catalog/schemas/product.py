from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

from catalog.core.dates import ensure_utc

# Integers are stored as signed 64-bit SQL values.
MAX_SQL_INTEGER = 2**63 - 1

NonNegativeFloat = Annotated[float, Field(strict=True, ge=0, allow_inf_nan=False)]
NonNegativeInt = Annotated[StrictInt, Field(ge=0, le=MAX_SQL_INTEGER)]
StrictFloat = Annotated[float, Field(strict=True, allow_inf_nan=False)]

PRODUCT_FIELDS = (
    "name",
    "description",
    "image",
    "category",
    "price",
    "quantity",
    "internal_reference",
    "shell_id",
    "inventory_status",
    "rating",
    "created_at",
    "updated_at",
)


class ProductPayload(BaseModel):
    """Full body of a create or update request; every field is required."""

    model_config = ConfigDict(extra="ignore")

    name: StrictStr
    description: StrictStr
    image: StrictStr
    category: StrictStr
    price: NonNegativeFloat
    quantity: NonNegativeInt
    internal_reference: StrictStr
    shell_id: StrictStr
    inventory_status: StrictStr
    rating: StrictFloat
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def _require_datetime_string(cls, value):
        if isinstance(value, datetime):
            return value
        if not isinstance(value, str):
            raise ValueError("must be an ISO-8601 date-time string")
        return value

    @field_validator("created_at", "updated_at")
    @classmethod
    def _normalize_timezone(cls, value: datetime) -> datetime:
        try:
            return ensure_utc(value)
        except OverflowError as exc:
            raise ValueError("date-time out of range") from exc


class ProductRead(BaseModel):
    id: int
    name: str
    description: str
    image: str
    category: str
    price: float
    quantity: int
    internal_reference: str
    shell_id: str
    inventory_status: str
    rating: float
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("created_at", "updated_at")
    @classmethod
    def _normalize_timezone(cls, value: datetime) -> datetime:
        # SQLite hands timestamps back without tzinfo.
        return ensure_utc(value)


class MessageResponse(BaseModel):
    message: str


class ProductCreatedResponse(MessageResponse):
    id: int


class ErrorResponse(BaseModel):
    error: str


__all__ = [
    "ErrorResponse",
    "MessageResponse",
    "PRODUCT_FIELDS",
    "ProductCreatedResponse",
    "ProductPayload",
    "ProductRead",
]
