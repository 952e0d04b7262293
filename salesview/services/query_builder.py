"""Translate transaction filter and sort state into parameterized SQL.

Predicates are built once in a backend-neutral form (a fragment with ``{}``
slots plus its bound values) and rendered for a driver placeholder style
afterwards. The count query and the page query share one rendered WHERE
clause, so both always see the same predicate.

Known quirks kept on purpose:

* ``tags`` matches when the stored comma-joined tags contain any requested
  tag as a substring, so ``"eco"`` also matches ``"eco-friendly"``.
* ``date_start``/``date_end`` are compared against the stored text. Stored
  dates are ``DD-MM-YYYY``, which does not sort chronologically.
* Sorting uses a single column with no tiebreak; rows with equal keys may
  come back in a different order on different pages.
"""

from dataclasses import dataclass, field
from typing import Optional

from salesview.core.constants import (
    DEFAULT_SORT_BY,
    DEFAULT_SORT_ORDER,
    SORT_COLUMNS,
    TRANSACTION_COLUMNS,
)

TABLE_NAME = "transactions"

_PLACEHOLDER_RENDERERS = {
    "qmark": lambda index: "?",
    "numeric_dollar": lambda index: f"${index}",
    "numeric": lambda index: f":{index}",
    "format": lambda index: "%s",
    "pyformat": lambda index: "%s",
}


@dataclass
class TransactionFilters:
    search: Optional[str] = None
    customer_region: list[str] = field(default_factory=list)
    gender: list[str] = field(default_factory=list)
    age_min: Optional[int] = None
    age_max: Optional[int] = None
    product_category: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    payment_method: list[str] = field(default_factory=list)
    date_start: Optional[str] = None
    date_end: Optional[str] = None


@dataclass
class SortSpec:
    sort_by: str = DEFAULT_SORT_BY
    sort_order: str = DEFAULT_SORT_ORDER

    @property
    def column(self) -> str:
        return SORT_COLUMNS.get(self.sort_by, SORT_COLUMNS[DEFAULT_SORT_BY])

    @property
    def direction(self) -> str:
        return "DESC" if str(self.sort_order).lower() == "desc" else "ASC"


@dataclass(frozen=True)
class Predicate:
    fragment: str
    values: tuple


@dataclass(frozen=True)
class RenderedQuery:
    sql: str
    params: tuple


class PlaceholderStyle:
    """Numbers placeholders across one statement for a DB-API paramstyle."""

    def __init__(self, paramstyle: str = "qmark"):
        renderer = _PLACEHOLDER_RENDERERS.get(paramstyle)
        if renderer is None:
            raise ValueError(f"Unsupported placeholder style: {paramstyle}")
        self.paramstyle = paramstyle
        self._renderer = renderer
        self._count = 0

    def next(self) -> str:
        self._count += 1
        return self._renderer(self._count)

    def render(self, predicate: Predicate) -> str:
        return predicate.fragment.format(*(self.next() for _ in predicate.values))


def _clean_text(value):
    if value is None:
        return None
    value_text = str(value).strip()
    return value_text or None


def _clean_values(values):
    cleaned = (str(value).strip() for value in values or [] if value is not None)
    return [value for value in cleaned if value]


def _membership(column, values):
    slots = ", ".join("{}" for _ in values)
    return Predicate(f"{column} IN ({slots})", tuple(values))


def build_predicates(filters: TransactionFilters) -> list[Predicate]:
    predicates = []

    search = _clean_text(filters.search)
    if search:
        term = "%{}%".format(search.lower())
        predicates.append(
            Predicate("(LOWER(customer_name) LIKE {} OR phone_number LIKE {})", (term, term))
        )

    regions = _clean_values(filters.customer_region)
    if regions:
        predicates.append(_membership("customer_region", regions))

    genders = _clean_values(filters.gender)
    if genders:
        predicates.append(_membership("gender", genders))

    if filters.age_min is not None:
        predicates.append(Predicate("age >= {}", (filters.age_min,)))
    if filters.age_max is not None:
        predicates.append(Predicate("age <= {}", (filters.age_max,)))

    categories = _clean_values(filters.product_category)
    if categories:
        predicates.append(_membership("product_category", categories))

    tags = _clean_values(filters.tags)
    if tags:
        tag_slots = " OR ".join("tags LIKE {}" for _ in tags)
        predicates.append(
            Predicate(f"({tag_slots})", tuple("%{}%".format(tag) for tag in tags))
        )

    payment_methods = _clean_values(filters.payment_method)
    if payment_methods:
        predicates.append(_membership("payment_method", payment_methods))

    date_start = _clean_text(filters.date_start)
    if date_start:
        predicates.append(Predicate("date >= {}", (date_start,)))
    date_end = _clean_text(filters.date_end)
    if date_end:
        predicates.append(Predicate("date <= {}", (date_end,)))

    return predicates


def build_where(filters: TransactionFilters, style: PlaceholderStyle) -> RenderedQuery:
    predicates = build_predicates(filters)
    if not predicates:
        return RenderedQuery("", ())
    conditions = [style.render(predicate) for predicate in predicates]
    params = tuple(value for predicate in predicates for value in predicate.values)
    return RenderedQuery("WHERE " + " AND ".join(conditions), params)


def build_order_by(sort: SortSpec) -> str:
    return f"ORDER BY {sort.column} {sort.direction}"


def build_count_query(filters: TransactionFilters, paramstyle: str = "qmark") -> RenderedQuery:
    where = build_where(filters, PlaceholderStyle(paramstyle))
    sql = f"SELECT COUNT(*) AS count FROM {TABLE_NAME} {where.sql}".rstrip()
    return RenderedQuery(sql, where.params)


def build_page_query(
    filters: TransactionFilters,
    sort: SortSpec,
    limit: int,
    offset: int,
    paramstyle: str = "qmark",
) -> RenderedQuery:
    style = PlaceholderStyle(paramstyle)
    where = build_where(filters, style)
    columns = ", ".join(TRANSACTION_COLUMNS)
    parts = [f"SELECT {columns} FROM {TABLE_NAME}"]
    if where.sql:
        parts.append(where.sql)
    parts.append(build_order_by(sort))
    parts.append(f"LIMIT {style.next()} OFFSET {style.next()}")
    return RenderedQuery(" ".join(parts), where.params + (limit, offset))


def build_summary_query(filters: TransactionFilters, paramstyle: str = "qmark") -> RenderedQuery:
    where = build_where(filters, PlaceholderStyle(paramstyle))
    sql = (
        "SELECT "
        "COUNT(*) AS total_records, "
        "COALESCE(SUM(quantity), 0) AS total_units, "
        "COALESCE(SUM(final_amount), 0) AS total_amount, "
        "COALESCE(SUM(total_amount - final_amount), 0) AS total_discount, "
        "COALESCE(SUM(CASE WHEN discount_percentage > 0 THEN 1 ELSE 0 END), 0) "
        "AS discounted_records "
        f"FROM {TABLE_NAME} {where.sql}"
    ).rstrip()
    return RenderedQuery(sql, where.params)


__all__ = [
    "PlaceholderStyle",
    "Predicate",
    "RenderedQuery",
    "SortSpec",
    "TransactionFilters",
    "build_count_query",
    "build_order_by",
    "build_page_query",
    "build_predicates",
    "build_summary_query",
    "build_where",
]
