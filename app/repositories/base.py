"""Base repository class."""

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any

import duckdb
from loguru import logger

from app.repositories.db import get_db, transaction


def placeholders(values: Sequence[Any]) -> str:
    """Build a `?, ?, ?` list for a parameterised IN clause."""
    return ", ".join("?" for _ in values)


class BaseRepository:
    """Base repository with common functionality.

    Pass `conn` to run against an explicit connection (tests, maintenance scripts);
    otherwise the thread-local connection is used.
    """

    def __init__(self, read_only: bool = True, conn: duckdb.DuckDBPyConnection | None = None):
        self._db = conn if conn is not None else get_db(read_only)
        self._read_only = read_only
        logger.debug("{} initialized", self.__class__.__name__)

    def _check_writable(self) -> None:
        if self._read_only:
            raise RuntimeError(f"{self.__class__.__name__} is read-only")

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Group writes into a single transaction."""
        self._check_writable()
        with transaction(self._db):
            yield

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query."""
        if params:
            return self._db.execute(query, params)
        return self._db.execute(query)

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()

    def fetchcol(self, query: str, params: list | None = None) -> list:
        """Execute and fetch the first column of every row."""
        return [r[0] for r in self.fetchall(query, params)]
