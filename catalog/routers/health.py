import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.config import get_settings
from catalog.database.session import get_db, ping

router = APIRouter(tags=["Health"])
logger = logging.getLogger(__name__)


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Report service status; 503 when the product store cannot be reached."""
    settings = get_settings()
    try:
        ping(db)
        store_status, status_code = "ok", 200
    except SQLAlchemyError:
        logger.exception("Product store health check failed")
        store_status, status_code = "unavailable", 503

    return JSONResponse(
        status_code=status_code,
        content={
            "status": "ok" if status_code == 200 else "degraded",
            "store": store_status,
            "app": settings.APP_NAME,
            "environment": settings.ENVIRONMENT,
            "time": datetime.now(timezone.utc).isoformat(),
        },
    )
