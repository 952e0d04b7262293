import json
import logging
from datetime import datetime, timezone

from salesview.config import Settings, get_settings

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(operation)s] - %(message)s"


class OperationFilter(logging.Filter):
    """Gives every record an ``operation`` so the text format can show it."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "operation", None):
            record.operation = "-"
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        operation = getattr(record, "operation", None)
        if operation and operation != "-":
            payload["operation"] = operation
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def build_handler(settings: Settings) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.addFilter(OperationFilter())
    if settings.LOG_JSON:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(fmt=TEXT_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    return handler


def setup_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(build_handler(settings))
    # statement echo stays off at INFO and DEBUG
    logging.getLogger("sqlalchemy.engine").setLevel(max(level, logging.WARNING))
