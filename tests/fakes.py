"""In-memory fake store for testing.

Implements the same ``ProductStore`` interface as ``SqlProductStore``
but keeps products in a dict. Ids come from a counter and are never reused.
"""

from __future__ import annotations

from catalog.models.product import Product
from catalog.stores.base import ProductStore


class FakeProductStore(ProductStore):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        self._next_id = 1
        self.pending: list[Product] = []
        self.pending_removals: list[Product] = []
        for product in products or []:
            self.save(product)

    def find_all(self) -> list[Product]:
        return [self._store[key] for key in sorted(self._store)]

    def find(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def find_by_name(self, name: str) -> list[Product]:
        needle = name.lower()
        return [p for p in self.find_all() if needle in p.name.lower()]

    def find_by_category(self, category: str) -> list[Product]:
        return [p for p in self.find_all() if p.category == category]

    def save(self, product: Product, flush: bool = True) -> None:
        self.pending.append(product)
        if flush:
            self._flush()

    def remove(self, product: Product, flush: bool = True) -> None:
        self.pending_removals.append(product)
        if flush:
            self._flush()

    def _flush(self) -> None:
        for product in self.pending:
            if product.id is None:
                product.id = self._next_id
                self._next_id += 1
            self._store[product.id] = product
        for product in self.pending_removals:
            self._store.pop(product.id, None)
        self.pending = []
        self.pending_removals = []


def make_payload(**overrides) -> dict:
    payload = {
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
    payload.update(overrides)
    return payload
