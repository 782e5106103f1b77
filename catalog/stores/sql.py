from __future__ import annotations

import logging
from typing import Callable, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.core.exceptions import StoreFailure
from catalog.models.product import Product
from catalog.stores.base import ProductStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SqlProductStore(ProductStore):
    """``ProductStore`` backed by a SQLAlchemy session."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_all(self) -> list[Product]:
        return self._run(
            "find_all",
            lambda: list(self._db.execute(select(Product).order_by(Product.id)).scalars().all()),
        )

    def find(self, product_id: int) -> Product | None:
        return self._run("find", lambda: self._db.get(Product, product_id))

    def find_by_name(self, name: str) -> list[Product]:
        stmt = (
            select(Product)
            .where(Product.name.contains(name, autoescape=True))
            .order_by(Product.id)
        )
        return self._run("find_by_name", lambda: list(self._db.execute(stmt).scalars().all()))

    def find_by_category(self, category: str) -> list[Product]:
        stmt = select(Product).where(Product.category == category).order_by(Product.id)
        return self._run("find_by_category", lambda: list(self._db.execute(stmt).scalars().all()))

    def save(self, product: Product, flush: bool = True) -> None:
        def _save() -> None:
            self._db.add(product)
            if flush:
                self._db.commit()
                self._db.refresh(product)

        self._run("save", _save)

    def remove(self, product: Product, flush: bool = True) -> None:
        def _remove() -> None:
            self._db.delete(product)
            if flush:
                self._db.commit()

        self._run("remove", _remove)

    def _run(self, operation: str, func: Callable[[], T]) -> T:
        try:
            return func()
        except SQLAlchemyError as exc:
            self._db.rollback()
            logger.exception("Product store %s failed", operation)
            raise StoreFailure() from exc


__all__ = ["SqlProductStore"]
