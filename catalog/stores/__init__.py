from catalog.stores.base import ProductStore
from catalog.stores.sql import SqlProductStore

__all__ = ["ProductStore", "SqlProductStore"]
