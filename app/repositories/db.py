"""DuckDB connection management."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager

import duckdb
from loguru import logger

from app.models import ALL_DDL
from settings import DB_PATH

_local = threading.local()

# Presence of this table marks an initialized schema
MARKER_TABLE = "module_data_visualizations"


def init_tables(conn: duckdb.DuckDBPyConnection) -> bool:
    """Create the schema unless it is already there. Returns True if created."""
    row = conn.execute(
        "SELECT COUNT(*) FROM information_schema.tables WHERE table_name = ?",
        [MARKER_TABLE],
    ).fetchone()
    if row[0] > 0:
        return False

    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.info("DB tables initialized ({} statements)", len(ALL_DDL))
    return True


def connect(path: str = DB_PATH, read_only: bool = False) -> duckdb.DuckDBPyConnection:
    """Open a connection, creating the schema first when opened writable.

    A read-only open of a fresh file would fail, so the schema is created
    through a short writable connection before it.
    """
    if read_only:
        with duckdb.connect(path) as bootstrap:
            init_tables(bootstrap)
        return duckdb.connect(path, read_only=True)

    conn = duckdb.connect(path)
    init_tables(conn)
    return conn


def get_db(read_only: bool = True) -> duckdb.DuckDBPyConnection:
    """Get thread-local connection, opening it on first use."""
    conn = getattr(_local, "conn", None)
    if conn is None:
        conn = _local.conn = connect(DB_PATH, read_only=read_only)
        logger.debug("DB connected: {} (read_only={})", DB_PATH, read_only)
    return conn


def close_db() -> None:
    """Close thread-local connection."""
    conn = getattr(_local, "conn", None)
    if conn is not None:
        conn.close()
        _local.conn = None
        logger.debug("DB connection closed")


@contextmanager
def transaction(conn: duckdb.DuckDBPyConnection) -> Iterator[duckdb.DuckDBPyConnection]:
    """Run the enclosed statements in one transaction, rolling back on any error."""
    conn.begin()
    try:
        yield conn
    except BaseException:
        conn.rollback()
        logger.debug("Transaction rolled back")
        raise
    conn.commit()
