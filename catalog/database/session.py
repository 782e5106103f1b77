from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from catalog.database.engine import engine


def build_session_factory(bind: Engine) -> sessionmaker:
    """Session factory used by the API, scripts and tests alike."""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=bind,
    )


SessionLocal = build_session_factory(engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def ping(db: Session) -> None:
    """Round-trip a trivial query; raises SQLAlchemyError when the store is down."""
    db.execute(text("SELECT 1"))


__all__ = ["SessionLocal", "build_session_factory", "get_db", "ping"]
