from salesview.services.import_service import ImportResult, import_file
from salesview.services.transaction_service import (
    get_filter_options,
    query_transactions,
    summarize_transactions,
)

__all__ = [
    "ImportResult",
    "get_filter_options",
    "import_file",
    "query_transactions",
    "summarize_transactions",
]
