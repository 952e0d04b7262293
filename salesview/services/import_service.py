import logging
from dataclasses import dataclass
from pathlib import Path

import pandas as pd
from openpyxl import load_workbook

from salesview.core.constants import (
    DECIMAL_COLUMNS,
    DISPLAY_COLUMNS,
    INTEGER_COLUMNS,
    TRANSACTION_COLUMNS,
)
from salesview.core.dates import normalize_date_text
from salesview.core.errors import ImportConflict
from salesview.database.store import TransactionStore

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".csv", ".xlsx")
DEFAULT_BATCH_SIZE = 500


def _header_key(value):
    value_text = str(value).replace("\ufeff", "").strip().lower()
    for char in (" ", "-", ".", "/"):
        value_text = value_text.replace(char, "_")
    return "_".join(part for part in value_text.split("_") if part)


HEADER_ALIASES = {_header_key(display): column for display, column in DISPLAY_COLUMNS}
HEADER_ALIASES.update({column: column for column in TRANSACTION_COLUMNS})


@dataclass
class ImportResult:
    rows_imported: int = 0
    batches: int = 0
    replaced: int = 0


def normalize_header(value):
    if value is None:
        return ""
    key = _header_key(value)
    return HEADER_ALIASES.get(key, key)


def _is_blank(value):
    if value is None:
        return True
    if isinstance(value, float) and value != value:
        return True
    return isinstance(value, str) and not value.strip()


def to_text(value):
    if _is_blank(value):
        return None
    return str(value).strip()


def to_int(value):
    """Integer coercion with a zero fallback, like ``parseInt(x) || 0``."""
    if _is_blank(value) or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    value_text = str(value).strip().replace(",", "")
    try:
        return int(value_text)
    except ValueError:
        pass
    try:
        return int(float(value_text))
    except (ValueError, OverflowError):
        return 0


def to_float(value):
    if _is_blank(value) or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    try:
        numeric = float(str(value).strip().replace(",", ""))
    except ValueError:
        return 0.0
    return numeric if numeric == numeric else 0.0


def coerce_row(record):
    """Map one source record (keyed by normalized header) to table values."""
    values = {}
    for column in TRANSACTION_COLUMNS:
        raw = record.get(column)
        if column in INTEGER_COLUMNS:
            values[column] = to_int(raw)
        elif column in DECIMAL_COLUMNS:
            values[column] = to_float(raw)
        elif column == "date":
            values[column] = normalize_date_text(raw)
        else:
            values[column] = to_text(raw)
    return values


def _normalize_record(record):
    return {normalize_header(key): value for key, value in record.items()}


def iter_csv_batches(path, batch_size):
    reader = pd.read_csv(
        path,
        dtype=str,
        keep_default_na=False,
        encoding="utf-8-sig",
        chunksize=batch_size,
    )
    with reader:
        for chunk in reader:
            records = chunk.to_dict(orient="records")
            yield [coerce_row(_normalize_record(record)) for record in records]


def iter_xlsx_batches(path, batch_size):
    workbook = load_workbook(path, read_only=True, data_only=True)
    try:
        worksheet = workbook.active
        rows_iter = worksheet.iter_rows(values_only=True)
        headers = next(rows_iter, None)
        if not headers:
            return
        header_keys = [normalize_header(header) for header in headers]
        indices = [(idx, key) for idx, key in enumerate(header_keys) if key]
        batch = []
        for row in rows_iter:
            if row is None or all(_is_blank(value) for value in row):
                continue
            record = {key: row[idx] for idx, key in indices if idx < len(row)}
            batch.append(coerce_row(record))
            if len(batch) >= batch_size:
                yield batch
                batch = []
        if batch:
            yield batch
    finally:
        workbook.close()


def iter_source_batches(path, batch_size=DEFAULT_BATCH_SIZE):
    source = Path(path)
    if not source.exists():
        raise FileNotFoundError(f"File not found: {source}")
    suffix = source.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError("Only .csv and .xlsx files are supported.")
    if batch_size < 1:
        raise ValueError("batch_size must be a positive integer")
    if suffix == ".xlsx":
        return iter_xlsx_batches(source, batch_size)
    return iter_csv_batches(source, batch_size)


def import_file(
    store: TransactionStore,
    path,
    *,
    batch_size=DEFAULT_BATCH_SIZE,
    replace=False,
) -> ImportResult:
    """Bulk-load a CSV or XLSX export into the transactions table.

    Refuses to load into a non-empty table unless ``replace`` is set, in
    which case existing rows are deleted first. Each batch is inserted in
    its own transaction; a failing batch is rolled back and the error
    propagates, leaving earlier batches committed.
    """
    batches = iter_source_batches(path, batch_size)

    result = ImportResult()
    existing = store.count_rows()
    if existing:
        if not replace:
            raise ImportConflict(existing)
        result.replaced = store.clear()
        logger.info("Cleared %s existing transactions before re-import", result.replaced)

    logger.info("Importing transactions from %s", path)
    for batch in batches:
        result.rows_imported += store.insert_batch(batch)
        result.batches += 1
        logger.info("Imported %s rows...", result.rows_imported)

    logger.info(
        "Import complete: %s rows in %s batches (table now holds %s)",
        result.rows_imported,
        result.batches,
        store.count_rows(),
    )
    return result


__all__ = [
    "ImportResult",
    "coerce_row",
    "import_file",
    "iter_source_batches",
    "normalize_header",
    "to_float",
    "to_int",
    "to_text",
]
