from fastapi import APIRouter, Depends, HTTPException, Query

from salesview.core.constants import API_PREFIX, DEFAULT_SORT_BY, DEFAULT_SORT_ORDER
from salesview.core.dates import parse_date
from salesview.core.errors import QueryFailed, StoreUnavailable
from salesview.dependencies import get_app_settings, get_store
from salesview.schemas.transaction import FilterOptions, TransactionPage, TransactionSummary
from salesview.services.query_builder import SortSpec, TransactionFilters
from salesview.services.transaction_service import (
    get_filter_options,
    query_transactions,
    summarize_transactions,
)

router = APIRouter(prefix=f"{API_PREFIX}/transactions", tags=["Transactions"])


def split_values(value):
    values = []
    if value:
        for entry in str(value).split(","):
            entry = entry.strip()
            if entry:
                values.append(entry)
    return values


def parse_optional_int(value, field):
    if value is None:
        return None
    value_text = str(value).strip()
    if not value_text:
        return None
    try:
        return int(value_text)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"{field} must be an integer.") from None


def parse_optional_date(value, field):
    # bounds are compared as given; parsing only rejects non-dates
    if value is None or not value.strip():
        return None
    value_text = value.strip()
    if parse_date(value_text) is None:
        raise HTTPException(status_code=400, detail=f"{field} must be a date (DD-MM-YYYY).")
    return value_text


def transaction_filters(
    search: str | None = Query(None, description="Customer name or phone number"),
    customer_region: str | None = Query(None, alias="customerRegion", description="Comma-separated"),
    gender: str | None = Query(None, description="Comma-separated"),
    age_min: str | None = Query(None, alias="ageMin"),
    age_max: str | None = Query(None, alias="ageMax"),
    product_category: str | None = Query(None, alias="productCategory", description="Comma-separated"),
    tags: str | None = Query(None, description="Comma-separated, any tag matches"),
    payment_method: str | None = Query(None, alias="paymentMethod", description="Comma-separated"),
    date_start: str | None = Query(None, alias="dateStart"),
    date_end: str | None = Query(None, alias="dateEnd"),
) -> TransactionFilters:
    return TransactionFilters(
        search=search.strip() if search and search.strip() else None,
        customer_region=split_values(customer_region),
        gender=split_values(gender),
        age_min=parse_optional_int(age_min, "ageMin"),
        age_max=parse_optional_int(age_max, "ageMax"),
        product_category=split_values(product_category),
        tags=split_values(tags),
        payment_method=split_values(payment_method),
        date_start=parse_optional_date(date_start, "dateStart"),
        date_end=parse_optional_date(date_end, "dateEnd"),
    )


@router.get("", response_model=TransactionPage)
def list_transactions(
    page: int = Query(1, ge=1, description="1-based page number"),
    limit: int | None = Query(None, ge=1, description="Page size"),
    sort_by: str = Query(DEFAULT_SORT_BY, alias="sortBy", description="date | quantity | customerName"),
    sort_order: str = Query(DEFAULT_SORT_ORDER, alias="sortOrder", description="asc | desc"),
    filters: TransactionFilters = Depends(transaction_filters),
    store=Depends(get_store),
    settings=Depends(get_app_settings),
):
    page_size = limit or settings.DEFAULT_PAGE_SIZE
    if page_size > settings.MAX_PAGE_SIZE:
        raise HTTPException(
            status_code=400,
            detail=f"limit must be at most {settings.MAX_PAGE_SIZE}.",
        )
    try:
        return query_transactions(
            store,
            page,
            page_size,
            filters,
            SortSpec(sort_by=sort_by, sort_order=sort_order),
        )
    except StoreUnavailable as exc:
        raise HTTPException(status_code=503, detail="Database unavailable") from exc
    except QueryFailed as exc:
        raise HTTPException(status_code=500, detail="Failed to fetch transactions") from exc


@router.get("/filter-options", response_model=FilterOptions)
def filter_options(store=Depends(get_store)):
    try:
        return get_filter_options(store)
    except StoreUnavailable as exc:
        raise HTTPException(status_code=503, detail="Database unavailable") from exc
    except QueryFailed as exc:
        raise HTTPException(status_code=500, detail="Failed to fetch filter options") from exc


@router.get("/summary", response_model=TransactionSummary)
def transaction_summary(
    filters: TransactionFilters = Depends(transaction_filters),
    store=Depends(get_store),
):
    try:
        return summarize_transactions(store, filters)
    except StoreUnavailable as exc:
        raise HTTPException(status_code=503, detail="Database unavailable") from exc
    except QueryFailed as exc:
        raise HTTPException(status_code=500, detail="Failed to summarize transactions") from exc


__all__ = ["router", "split_values", "transaction_filters"]
