import logging
import math
import time
from contextlib import contextmanager

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from salesview.core.errors import QueryFailed
from salesview.database.store import TransactionStore
from salesview.schemas.transaction import (
    FilterOptions,
    TransactionPage,
    TransactionRead,
    TransactionSummary,
)
from salesview.services.query_builder import (
    SortSpec,
    TransactionFilters,
    build_count_query,
    build_page_query,
    build_summary_query,
)

logger = logging.getLogger(__name__)

FACET_COLUMNS = (
    ("regions", "customer_region"),
    ("genders", "gender"),
    ("categories", "product_category"),
    ("payment_methods", "payment_method"),
)


@contextmanager
def _query_operation(operation):
    started = time.perf_counter()
    try:
        yield
    except (SQLAlchemyError, ValidationError) as exc:
        logger.error(
            "%s failed: %s",
            operation,
            exc.__class__.__name__,
            extra={"operation": operation},
        )
        raise QueryFailed(operation) from exc
    logger.debug("%s took %.1f ms", operation, (time.perf_counter() - started) * 1000)


def calculate_total_pages(total_records, page_size):
    return math.ceil(total_records / page_size)


def query_transactions(
    store: TransactionStore,
    page: int,
    page_size: int,
    filters: TransactionFilters | None = None,
    sort: SortSpec | None = None,
) -> TransactionPage:
    if page < 1:
        raise ValueError("page must be a positive integer")
    if page_size < 1:
        raise ValueError("page_size must be a positive integer")
    filters = filters or TransactionFilters()
    sort = sort or SortSpec()
    offset = (page - 1) * page_size

    with _query_operation("query_transactions"):
        paramstyle = store.paramstyle
        count_query = build_count_query(filters, paramstyle)
        total_records = int(store.fetch_scalar(count_query.sql, count_query.params) or 0)
        page_query = build_page_query(filters, sort, page_size, offset, paramstyle)
        rows = store.fetch_all(page_query.sql, page_query.params)
        transactions = [TransactionRead.model_validate(row) for row in rows]

    return TransactionPage(
        transactions=transactions,
        current_page=page,
        total_pages=calculate_total_pages(total_records, page_size),
        total_records=total_records,
        page_size=page_size,
    )


def split_tags(value):
    if not value:
        return []
    return [tag.strip() for tag in str(value).split(",") if tag.strip()]


def get_filter_options(store: TransactionStore) -> FilterOptions:
    options = {}
    with _query_operation("get_filter_options"):
        for key, column in FACET_COLUMNS:
            # noinspection SqlNoDataSourceInspection
            rows = store.fetch_all(
                f"SELECT DISTINCT {column} AS value FROM transactions "
                f"WHERE {column} IS NOT NULL ORDER BY value"
            )
            options[key] = [row["value"] for row in rows]

        # noinspection SqlNoDataSourceInspection
        tag_rows = store.fetch_all(
            "SELECT DISTINCT tags AS value FROM transactions WHERE tags IS NOT NULL"
        )

    vocabulary = set()
    for row in tag_rows:
        vocabulary.update(split_tags(row["value"]))
    options["tags"] = sorted(vocabulary)
    return FilterOptions(**options)


def summarize_transactions(
    store: TransactionStore,
    filters: TransactionFilters | None = None,
) -> TransactionSummary:
    filters = filters or TransactionFilters()
    with _query_operation("summarize_transactions"):
        query = build_summary_query(filters, store.paramstyle)
        rows = store.fetch_all(query.sql, query.params)

    row = rows[0] if rows else {}
    return TransactionSummary(
        total_records=int(row.get("total_records") or 0),
        total_units=int(row.get("total_units") or 0),
        total_amount=round(float(row.get("total_amount") or 0.0), 2),
        total_discount=round(float(row.get("total_discount") or 0.0), 2),
        discounted_records=int(row.get("discounted_records") or 0),
    )


__all__ = [
    "calculate_total_pages",
    "get_filter_options",
    "query_transactions",
    "split_tags",
    "summarize_transactions",
]
