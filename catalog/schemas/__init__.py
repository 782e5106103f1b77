from catalog.schemas.product import (
    PRODUCT_FIELDS,
    ErrorResponse,
    MessageResponse,
    ProductCreatedResponse,
    ProductPayload,
    ProductRead,
)

__all__ = [
    "ErrorResponse",
    "MessageResponse",
    "PRODUCT_FIELDS",
    "ProductCreatedResponse",
    "ProductPayload",
    "ProductRead",
]
