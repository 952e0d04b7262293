from fastapi import HTTPException, Request

from salesview.config import Settings, get_settings
from salesview.database.store import TransactionStore


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def get_store(request: Request) -> TransactionStore:
    store = getattr(request.app.state, "store", None)
    if store is None or not store.is_open:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return store


__all__ = ["get_app_settings", "get_store"]
