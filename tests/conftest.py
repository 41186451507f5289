"""Shared fixtures: in-memory DuckDB with all tables, seeding helpers, service."""

from datetime import datetime, timedelta

import duckdb
import pytest

from app.repositories.db import init_tables
from app.repositories.forms import FormRepository, ViewRepository
from app.repositories.visualization import (
    ClientGrantRepository,
    VisualizationCacheRepository,
    VisualizationRepository,
)
from app.services.visualization import VisualizationService


class RecordingConnection:
    """DuckDB connection wrapper that records every executed statement."""

    def __init__(self, conn: duckdb.DuckDBPyConnection):
        self._conn = conn
        self.queries: list[str] = []

    def execute(self, query: str, params: list | None = None):
        self.queries.append(" ".join(query.split()))
        if params is None:
            return self._conn.execute(query)
        return self._conn.execute(query, params)

    def statements(self, verb: str) -> list[str]:
        return [q for q in self.queries if q.upper().startswith(verb.upper())]

    def __getattr__(self, name):
        return getattr(self._conn, name)


class Seeder:
    """Insert host and visualization rows directly."""

    def __init__(self, conn: duckdb.DuckDBPyConnection):
        self._conn = conn

    def form(self, form_id: int, name: str, is_complete: bool = True, list_order: int | None = None) -> None:
        self._conn.execute(
            "INSERT INTO forms (form_id, form_name, is_complete, list_order) VALUES (?, ?, ?, ?)",
            [form_id, name, is_complete, list_order if list_order is not None else form_id],
        )

    def view(self, view_id: int, form_id: int, name: str, view_order: int | None = None) -> None:
        self._conn.execute(
            "INSERT INTO form_views (view_id, form_id, view_name, view_order) VALUES (?, ?, ?, ?)",
            [view_id, form_id, name, view_order if view_order is not None else view_id],
        )

    def vis(
        self,
        vis_id: int,
        form_id: int = 1,
        view_id: int = 10,
        access_type: str = "public",
        export_group_id: int | None = None,
        list_order: int | None = None,
    ) -> None:
        self._conn.execute(
            """
            INSERT INTO module_data_visualizations
                (vis_id, vis_name, vis_type, chart_type, form_id, view_id, access_type, export_group_id, list_order)
            VALUES (?, ?, 'activity', 'line_chart', ?, ?, ?, ?, ?)
            """,
            [
                vis_id,
                f"Vis {vis_id}",
                form_id,
                view_id,
                access_type,
                export_group_id,
                list_order if list_order is not None else vis_id,
            ],
        )

    def grant(self, vis_id: int, account_id: int) -> None:
        self._conn.execute(
            "INSERT INTO module_data_visualization_clients (vis_id, account_id) VALUES (?, ?)",
            [vis_id, account_id],
        )

    def cache(self, vis_id: int, data: str = '{"rows": []}') -> None:
        self._conn.execute(
            "INSERT INTO module_data_visualization_cache (vis_id, last_cached, data) VALUES (?, ?, ?)",
            [vis_id, datetime(2020, 1, 1), data],
        )

    def count(self, table: str, vis_ids: list[int] | None = None) -> int:
        if vis_ids is None:
            return self._conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
        marks = ", ".join("?" for _ in vis_ids)
        return self._conn.execute(f"SELECT COUNT(*) FROM {table} WHERE vis_id IN ({marks})", vis_ids).fetchone()[0]


class FakeClock:
    """Clock returning a fixed time that moves one minute per call."""

    def __init__(self, start: datetime = datetime(2026, 3, 1, 9, 30)):
        self.now = start
        self.calls: list[datetime] = []

    def __call__(self) -> datetime:
        current = self.now
        self.calls.append(current)
        self.now = current + timedelta(minutes=1)
        return current


@pytest.fixture
def raw_conn():
    conn = duckdb.connect(":memory:")
    init_tables(conn)
    yield conn
    conn.close()


@pytest.fixture
def conn(raw_conn):
    return RecordingConnection(raw_conn)


@pytest.fixture
def seed(raw_conn):
    return Seeder(raw_conn)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def repos(conn):
    return {
        "vis_repo": VisualizationRepository(read_only=False, conn=conn),
        "client_repo": ClientGrantRepository(read_only=False, conn=conn),
        "cache_repo": VisualizationCacheRepository(read_only=False, conn=conn),
        "form_repo": FormRepository(conn=conn),
        "view_repo": ViewRepository(conn=conn),
    }


@pytest.fixture
def service(repos, clock):
    return VisualizationService(**repos, clock=clock)
