import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from sqlalchemy.exc import SQLAlchemyError

from salesview.core.constants import API_PREFIX
from salesview.dependencies import get_app_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix=API_PREFIX, tags=["Health"])


@router.get("/health")
def health_check(request: Request):
    settings = get_app_settings(request)
    payload = {
        "status": "ok",
        "app": settings.APP_NAME,
        "environment": settings.ENVIRONMENT,
        "database": "connected",
        "recordCount": 0,
        "time": datetime.now(timezone.utc).isoformat(),
    }

    store = getattr(request.app.state, "store", None)
    if store is None or not store.is_open:
        payload["status"] = "degraded"
        payload["database"] = "unavailable"
        return payload

    try:
        payload["recordCount"] = store.count_rows()
    except SQLAlchemyError as exc:
        logger.warning("Health check could not count transactions: %s", exc.__class__.__name__)
        payload["status"] = "degraded"
        payload["database"] = "connection error"
    return payload


__all__ = ["router"]
