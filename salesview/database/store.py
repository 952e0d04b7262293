import logging
from pathlib import Path

from sqlalchemy import delete, func, insert, select
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError

from salesview.core.errors import StoreUnavailable
from salesview.database.base import Base
from salesview.database.engine import create_store_engine, is_sqlite_memory_url
from salesview.models.transaction import Transaction

logger = logging.getLogger(__name__)


class TransactionStore:
    """Handle on the relational store holding one row per transaction.

    Built explicitly, opened at process start and closed on shutdown. Queries
    are executed through the driver with positional parameters, so callers
    render placeholders in :attr:`paramstyle`.
    """

    def __init__(self, database_url: str, *, echo: bool = False):
        self.database_url = database_url
        self._echo = echo
        self._engine: Engine | None = None

    def __enter__(self):
        return self.open()

    def __exit__(self, *exc_info):
        self.close()

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise StoreUnavailable("transaction store is not open")
        return self._engine

    @property
    def paramstyle(self) -> str:
        return self.engine.dialect.paramstyle

    @property
    def display_url(self) -> str:
        return make_url(self.database_url).render_as_string(hide_password=True)

    def open(self):
        if self._engine is not None:
            return self
        engine = None
        try:
            _ensure_sqlite_parent_dir(self.database_url)
            engine = create_store_engine(self.database_url, echo=self._echo)
            Base.metadata.create_all(bind=engine)
            with engine.connect() as conn:
                conn.exec_driver_sql("SELECT 1")
        except (SQLAlchemyError, OSError) as exc:
            if engine is not None:
                engine.dispose()
            raise StoreUnavailable(f"cannot open transaction store at {self.display_url}") from exc
        self._engine = engine
        logger.info("Transaction store ready: %s", self.display_url)
        return self

    def close(self) -> None:
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        logger.info("Transaction store closed")

    def fetch_all(self, sql: str, params=()) -> list[dict]:
        with self.engine.connect() as conn:
            result = conn.exec_driver_sql(sql, tuple(params) if params else None)
            return [dict(row) for row in result.mappings()]

    def fetch_scalar(self, sql: str, params=()):
        with self.engine.connect() as conn:
            return conn.exec_driver_sql(sql, tuple(params) if params else None).scalar()

    def count_rows(self) -> int:
        with self.engine.connect() as conn:
            return conn.execute(select(func.count()).select_from(Transaction.__table__)).scalar_one()

    def insert_batch(self, rows: list[dict]) -> int:
        if not rows:
            return 0
        # engine.begin() rolls the whole batch back if any row fails
        with self.engine.begin() as conn:
            conn.execute(insert(Transaction.__table__), rows)
        return len(rows)

    def clear(self) -> int:
        with self.engine.begin() as conn:
            result = conn.execute(delete(Transaction.__table__))
        return result.rowcount


def _ensure_sqlite_parent_dir(database_url: str) -> None:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite" or is_sqlite_memory_url(url):
        return
    if url.database.startswith("file:"):
        return
    Path(url.database).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)


__all__ = ["TransactionStore"]
