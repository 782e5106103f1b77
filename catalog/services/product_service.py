"""Catalog operations on top of a ``ProductStore``.

Each method is one request/response exchange. Lookups that target a
missing id raise ``ProductNotFoundError`` before anything is written, and
create/update payloads are validated in full before the store is touched.
Update is a find followed by a save with no locking, so two concurrent
updates of the same product end with the last write.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from catalog.core.exceptions import (
    ProductNotFoundError,
    ProductValidationError,
    describe_errors,
)
from catalog.models.product import Product
from catalog.schemas.product import PRODUCT_FIELDS, ProductPayload
from catalog.stores.base import ProductStore

logger = logging.getLogger(__name__)


def parse_payload(payload: Any) -> ProductPayload:
    if not isinstance(payload, dict):
        raise ProductValidationError("Request body must be a JSON object")
    try:
        return ProductPayload.model_validate(payload)
    except ValidationError as exc:
        raise ProductValidationError(describe_errors(exc.errors())) from exc


def apply_payload(product: Product, payload: ProductPayload) -> Product:
    # Full replace: every writable field is overwritten, including created_at.
    for field in PRODUCT_FIELDS:
        setattr(product, field, getattr(payload, field))
    return product


class ProductService:

    def __init__(self, store: ProductStore) -> None:
        self._store = store

    def list_all(self) -> list[Product]:
        return self._store.find_all()

    def get(self, product_id: int) -> Product:
        product = self._store.find(product_id)
        if product is None:
            logger.debug("Product %s not found", product_id)
            raise ProductNotFoundError(product_id)
        return product

    def search_by_name(self, name: str) -> list[Product]:
        return self._store.find_by_name(name)

    def list_by_category(self, category: str) -> list[Product]:
        return self._store.find_by_category(category)

    def create(self, payload: Any) -> Product:
        try:
            data = parse_payload(payload)
        except ProductValidationError as exc:
            logger.info("Rejected product create: %s", exc.message)
            raise
        product = apply_payload(Product(), data)
        self._store.save(product, flush=True)
        logger.info("Created product %s (%s)", product.id, product.name)
        return product

    def update(self, product_id: int, payload: Any) -> Product:
        product = self.get(product_id)
        try:
            data = parse_payload(payload)
        except ProductValidationError as exc:
            logger.info("Rejected update of product %s: %s", product_id, exc.message)
            raise
        apply_payload(product, data)
        self._store.save(product, flush=True)
        logger.info("Updated product %s", product_id)
        return product

    def delete(self, product_id: int) -> None:
        product = self.get(product_id)
        self._store.remove(product, flush=True)
        logger.info("Deleted product %s", product_id)


__all__ = ["ProductService", "apply_payload", "parse_payload"]
