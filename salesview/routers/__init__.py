from salesview.routers.health import router as health_router
from salesview.routers.transactions import router as transactions_router

__all__ = [
    "health_router",
    "transactions_router",
]
