from catalog.database.base import Base
from catalog.database.engine import build_engine, create_schema, engine
from catalog.database.session import SessionLocal, build_session_factory, get_db, ping

__all__ = [
    "Base",
    "SessionLocal",
    "build_engine",
    "build_session_factory",
    "create_schema",
    "engine",
    "get_db",
    "ping",
]
