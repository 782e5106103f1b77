"""Persistence contract consumed by ``ProductService``.

The service never talks to a database directly; it is handed a
``ProductStore`` at construction time. ``SqlProductStore`` is the
SQLAlchemy implementation used by the HTTP app; tests substitute an
in-memory fake.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.models.product import Product


class ProductStore(ABC):

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every product, ordered by id."""

    @abstractmethod
    def find(self, product_id: int) -> Product | None:
        """Return the product with this id, or None if not found."""

    @abstractmethod
    def find_by_name(self, name: str) -> list[Product]:
        """Return products whose name contains ``name``."""

    @abstractmethod
    def find_by_category(self, category: str) -> list[Product]:
        """Return products whose category equals ``category`` exactly."""

    @abstractmethod
    def save(self, product: Product, flush: bool = True) -> None:
        """Persist a new or modified product.

        A new product receives its id no later than the flush. With
        ``flush=False`` the write stays pending until the next flushing call.
        """

    @abstractmethod
    def remove(self, product: Product, flush: bool = True) -> None:
        """Delete a product permanently."""


__all__ = ["ProductStore"]
