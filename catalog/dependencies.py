from fastapi import Depends
from sqlalchemy.orm import Session

from catalog.database.session import get_db
from catalog.services.product_service import ProductService
from catalog.stores.sql import SqlProductStore


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(SqlProductStore(db))


__all__ = ["get_db", "get_product_service"]
