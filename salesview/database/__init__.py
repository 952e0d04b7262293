from salesview.database.base import Base
from salesview.database.engine import create_store_engine
from salesview.database.store import TransactionStore

__all__ = ["Base", "TransactionStore", "create_store_engine"]
