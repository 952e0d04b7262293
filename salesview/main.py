import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from salesview.config import Settings, get_settings
from salesview.core.constants import API_PREFIX
from salesview.core.errors import StoreUnavailable
from salesview.core.logging import setup_logging
from salesview.database.store import TransactionStore
from salesview.routers import health_router, transactions_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, store: TransactionStore | None = None) -> FastAPI:
    if settings is None:
        settings = get_settings()
    if store is None:
        store = TransactionStore(settings.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            store.open()
        except StoreUnavailable:
            logger.exception("Database initialization failed; serving degraded health")
        app.state.store = store
        try:
            yield
        finally:
            store.close()

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.settings = settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(transactions_router)

    @app.get("/")
    def root():
        return {
            "message": settings.APP_NAME,
            "status": "running",
            "environment": settings.ENVIRONMENT,
            "endpoints": {
                "health": f"{API_PREFIX}/health",
                "transactions": f"{API_PREFIX}/transactions",
                "filterOptions": f"{API_PREFIX}/transactions/filter-options",
                "summary": f"{API_PREFIX}/transactions/summary",
            },
        }

    return app


setup_logging()
app = create_app()


__all__ = ["app", "create_app"]
