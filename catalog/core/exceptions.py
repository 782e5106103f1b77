"""Errors raised by the catalog service and its stores.

Routers never build error responses by hand: the handlers registered in
``catalog.main`` map each subclass of ``CatalogError`` to its status code
and an ``{"error": ...}`` body.
"""


class CatalogError(Exception):
    """Base class for catalog errors."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        self.message = message or self.message


class ProductNotFoundError(CatalogError):
    """The requested product id does not exist."""

    status_code = 404
    message = "Product not found"

    def __init__(self, product_id: int | None = None) -> None:
        super().__init__()
        self.product_id = product_id


class ProductValidationError(CatalogError):
    """A create/update payload is missing fields or has malformed values."""

    status_code = 400
    message = "Invalid product payload"


class StoreFailure(CatalogError):
    """The persistence layer rejected or could not perform an operation."""

    status_code = 500
    message = "Product store failure"


def describe_errors(errors) -> str:
    """Render pydantic/FastAPI error dicts as one human readable sentence."""
    missing = []
    invalid = []
    for error in errors:
        field = ".".join(str(part) for part in error.get("loc", ())) or "body"
        if error.get("type") == "missing":
            missing.append(field)
        else:
            invalid.append("{}: {}".format(field, error.get("msg", "invalid value")))

    parts = []
    if missing:
        parts.append("Missing required fields: {}".format(", ".join(missing)))
    if invalid:
        parts.append("Invalid fields: {}".format("; ".join(invalid)))
    return ". ".join(parts) or ProductValidationError.message


__all__ = [
    "CatalogError",
    "ProductNotFoundError",
    "ProductValidationError",
    "StoreFailure",
    "describe_errors",
]
