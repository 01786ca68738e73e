"""Load a question corpus file into the configured database."""
from __future__ import annotations

import argparse
import logging
import sys

from qa_service.core.settings import Settings
from qa_service.db.session import Database
from qa_service.schemas.ingest import load_documents
from qa_service.services.ingestion import IngestionPipeline

logger = logging.getLogger("qa_service.ingest")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Ingest a JSON question corpus into the database")
    parser.add_argument(
        "data_file",
        nargs="?",
        default=None,
        help="Path to the JSON corpus (defaults to DB_DATA_FILE)",
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create any missing tables before loading.",
    )
    parser.add_argument(
        "--skip-existing",
        action="store_true",
        help="Skip questions that are already stored instead of failing on them.",
    )
    return parser


def run(args: argparse.Namespace) -> None:
    """Read settings and the data file, then ingest it.

    Raises:
        Exception: Any configuration, input or store error; the caller turns
            it into a non-zero exit status.
    """
    settings = Settings()  # type: ignore[call-arg]
    logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    data_file = args.data_file or settings.db_data_file
    if not data_file:
        raise ValueError("Environment variable 'DB_DATA_FILE' not set and no data file given")

    logger.info("Reading data file '%s'...", data_file)
    documents = load_documents(data_file)

    logger.info("Loading %d questions into database...", len(documents))
    database = Database.from_url(settings.effective_database_url, echo=settings.sql_debug)
    try:
        if args.create_tables:
            database.create_tables()
        IngestionPipeline(database.session_factory, skip_existing=args.skip_existing).run(documents)
    finally:
        database.dispose()


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    try:
        run(args)
    except Exception as exc:
        print(f"[ingest] ERROR: {exc}", file=sys.stderr)
        sys.exit(1)
    print("Done!")


if __name__ == "__main__":
    main()
