"""Create (or reset) the configured PostgreSQL database before ingestion."""
from __future__ import annotations

import argparse
import sys

import psycopg
from psycopg import sql
from sqlalchemy.engine import make_url

from qa_service.core.settings import get_settings


def to_psycopg_urls(db_url: str) -> tuple[str, str, str]:
    """Return ``(target_url, admin_url, target_db)`` for psycopg.connect().

    SQLAlchemy driver suffixes (``postgresql+psycopg``) are dropped; the admin
    URL points at the ``postgres`` maintenance database on the same server.
    """
    url = make_url(db_url.strip().strip("'\""))
    if url.get_backend_name() != "postgresql":
        raise ValueError(f"Not a PostgreSQL URL: {url.render_as_string()!r}")
    target_db = url.database or "postgres"
    plain = url.set(drivername="postgresql")
    return (
        plain.render_as_string(hide_password=False),
        plain.set(database="postgres").render_as_string(hide_password=False),
        target_db,
    )


def ensure_database_exists(admin_url: str, target_db: str) -> None:
    """Create ``target_db`` if it is missing."""
    with psycopg.connect(admin_url, autocommit=True) as conn, conn.cursor() as cur:
        cur.execute("SELECT 1 FROM pg_database WHERE datname = %s", (target_db,))
        if cur.fetchone() is None:
            cur.execute(sql.SQL("CREATE DATABASE {}").format(sql.Identifier(target_db)))
            print(f"[ensure_db] created database {target_db}")
        else:
            print(f"[ensure_db] database {target_db} already exists")


def drop_all_tables(target_url: str) -> None:
    """Drop and recreate the public schema of the target database."""
    with psycopg.connect(target_url, autocommit=True) as conn, conn.cursor() as cur:
        cur.execute("DROP SCHEMA IF EXISTS public CASCADE")
        cur.execute("CREATE SCHEMA public")
        cur.execute("GRANT ALL ON SCHEMA public TO CURRENT_USER")
    print("[ensure_db] dropped all tables in public schema")


def main() -> None:
    parser = argparse.ArgumentParser(description="Ensure or reset the configured database")
    parser.add_argument(
        "--drop-tables",
        action="store_true",
        help="Drop and recreate the public schema after ensuring the database exists.",
    )
    parser.add_argument(
        "--url",
        default=None,
        help="Override database URL (defaults to the configured URL)",
    )
    args = parser.parse_args()

    try:
        raw_url = args.url or get_settings().effective_database_url
        target_url, admin_url, target_db = to_psycopg_urls(raw_url)
        ensure_database_exists(admin_url, target_db)
        if args.drop_tables:
            drop_all_tables(target_url)
    except Exception as exc:
        print(f"[ensure_db] ERROR: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
