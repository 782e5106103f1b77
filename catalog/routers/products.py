from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from catalog.config import get_settings
from catalog.dependencies import get_product_service
from catalog.schemas.product import (
    ErrorResponse,
    MessageResponse,
    ProductCreatedResponse,
    ProductRead,
)
from catalog.services.product_service import ProductService

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Product not found"}}
_INVALID = {400: {"model": ErrorResponse, "description": "Invalid product payload"}}

_PAYLOAD_BODY = Body(
    ...,
    description="All twelve product fields; the id is assigned by the store.",
    openapi_examples={
        "widget": {
            "value": {
                "name": "Widget",
                "description": "d",
                "image": "i.png",
                "category": "tools",
                "price": 9.99,
                "quantity": 5,
                "internal_reference": "REF1",
                "shell_id": "S1",
                "inventory_status": "INSTOCK",
                "rating": 4.5,
                "created_at": "2024-01-01T00:00:00Z",
                "updated_at": "2024-01-01T00:00:00Z",
            }
        }
    },
)


def _to_read(products) -> list[ProductRead]:
    return [ProductRead.model_validate(product) for product in products]


def list_products(service: ProductService = Depends(get_product_service)):
    return _to_read(service.list_all())


def get_product(product_id: int, service: ProductService = Depends(get_product_service)):
    return ProductRead.model_validate(service.get(product_id))


def search_products(name: str, service: ProductService = Depends(get_product_service)):
    return _to_read(service.search_by_name(name))


def list_products_by_category(
    category: str,
    service: ProductService = Depends(get_product_service),
):
    return _to_read(service.list_by_category(category))


def delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    service.delete(product_id)
    return MessageResponse(message="Product deleted successfully")


def update_product(
    product_id: int,
    payload: Any = _PAYLOAD_BODY,
    service: ProductService = Depends(get_product_service),
):
    service.update(product_id, payload)
    return MessageResponse(message="Product updated successfully")


def create_product(
    payload: Any = _PAYLOAD_BODY,
    service: ProductService = Depends(get_product_service),
):
    product = service.create(payload)
    body = ProductCreatedResponse(message="Product created successfully", id=product.id)
    return JSONResponse(status_code=201, content=body.model_dump())


# (method, path, endpoint, status, response model, extra responses, summary, description)
PRODUCT_ROUTES = (
    ("GET", "", list_products, 200, list[ProductRead], {},
     "Get all products", "Retrieves a list of all products."),
    ("GET", "/search/{name}", search_products, 200, list[ProductRead], {},
     "Search products by name", "Returns products whose name contains the given text."),
    ("GET", "/category/{category}", list_products_by_category, 200, list[ProductRead], {},
     "Get products by category", "Returns products whose category matches exactly."),
    ("GET", "/{product_id}", get_product, 200, ProductRead, _NOT_FOUND,
     "Get a product by ID", "Retrieves a single product by its ID."),
    ("DELETE", "/{product_id}", delete_product, 200, MessageResponse, _NOT_FOUND,
     "Delete a product by ID", "Deletes a product permanently."),
    ("PUT", "/{product_id}", update_product, 200, MessageResponse, {**_NOT_FOUND, **_INVALID},
     "Update a product by ID", "Replaces every field of an existing product."),
    ("POST", "", create_product, 201, ProductCreatedResponse, _INVALID,
     "Create a new product", "Creates a product from a full payload."),
)


def build_router(prefix: str) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=["Products"])
    for method, path, endpoint, status_code, model, responses, summary, description in PRODUCT_ROUTES:
        router.add_api_route(
            path,
            endpoint,
            methods=[method],
            status_code=status_code,
            response_model=model,
            responses=responses,
            summary=summary,
            description=description,
            name=endpoint.__name__,
        )
    return router


router = build_router(get_settings().API_PREFIX)


__all__ = ["PRODUCT_ROUTES", "build_router", "router"]
