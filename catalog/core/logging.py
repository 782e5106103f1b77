import json
import logging
from datetime import datetime, timezone

from catalog.config import get_settings

# Request attributes attached by the access log middleware in catalog.main.
REQUEST_FIELDS = ("method", "path", "status_code", "duration_ms")

# Loggers that duplicate the catalog access log or only add transport noise.
QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


class RequestFieldsFilter(logging.Filter):
    """Give every record the request attributes so format strings never fail."""

    def filter(self, record: logging.LogRecord) -> bool:
        for field in REQUEST_FIELDS:
            if not hasattr(record, field):
                setattr(record, field, "-")
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in REQUEST_FIELDS:
            value = getattr(record, field, "-")
            if value != "-":
                payload[field] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def setup_logging(level: str | None = None) -> None:
    settings = get_settings()
    level_name = (level or settings.LOG_LEVEL).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler()
    handler.addFilter(RequestFieldsFilter())
    if settings.LOG_JSON:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)s %(name)s [%(method)s %(path)s] - %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S",
            )
        )

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))


__all__ = ["JsonFormatter", "QUIET_LOGGERS", "RequestFieldsFilter", "setup_logging"]
