import argparse
import sys
from pathlib import Path

# Ensure repo root is on sys.path when running this script directly.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from sqlalchemy.exc import SQLAlchemyError

from salesview.config import get_settings
from salesview.core.errors import ImportConflict, StoreUnavailable
from salesview.core.logging import setup_logging
from salesview.database.store import TransactionStore
from salesview.services.import_service import import_file


def parse_args(argv=None):
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Load sales transactions from a CSV or XLSX export."
    )
    parser.add_argument(
        "--path",
        default=settings.IMPORT_CSV_PATH,
        help=f"Source file (default: {settings.IMPORT_CSV_PATH}).",
    )
    parser.add_argument(
        "--database-url",
        default=settings.DATABASE_URL,
        help="Target database URL (default: DATABASE_URL setting).",
    )
    parser.add_argument(
        "--batch-size",
        type=int,
        default=settings.IMPORT_BATCH_SIZE,
        help="Rows per insert transaction.",
    )
    parser.add_argument(
        "--yes",
        action="store_true",
        help="Clear and re-import without asking when the table already has rows.",
    )
    return parser.parse_args(argv)


def confirm_replace(existing, input_fn=input):
    print(f"Database already has {existing} records.")
    answer = input_fn("Do you want to clear and re-import? (yes/no): ")
    return answer.strip().lower() == "yes"


def run_import(store, path, batch_size, assume_yes=False, input_fn=input):
    try:
        return import_file(store, path, batch_size=batch_size, replace=assume_yes)
    except ImportConflict as conflict:
        if not confirm_replace(conflict.existing, input_fn=input_fn):
            print("Import cancelled.")
            return None
    return import_file(store, path, batch_size=batch_size, replace=True)


def main(argv=None):
    setup_logging()
    args = parse_args(argv)
    store = TransactionStore(args.database_url)
    try:
        with store:
            result = run_import(store, args.path, args.batch_size, assume_yes=args.yes)
    except (OSError, ValueError, SQLAlchemyError, StoreUnavailable) as exc:
        raise SystemExit(f"Import failed: {exc}") from exc

    if result is None:
        return
    if result.replaced:
        print(f"Cleared {result.replaced} existing records.")
    print(f"Imported {result.rows_imported} transactions in {result.batches} batches.")


if __name__ == "__main__":
    main()
