"""Dependency Injection container - initialized at app startup."""

import duckdb

from app.hooks import DELETE_FORM, HookRegistry
from app.repositories.forms import FormRepository, ViewRepository
from app.repositories.visualization import (
    ClientGrantRepository,
    VisualizationCacheRepository,
    VisualizationRepository,
)
from app.services.visualization import VisualizationService


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, conn: duckdb.DuckDBPyConnection | None = None, force: bool = False) -> None:
        """Initialize all dependencies. Call once at app startup.

        `conn` overrides the thread-local connection; `force` rebuilds an
        already initialized container.
        """
        if self._initialized and not force:
            return

        # Repositories (singletons); writable ones open the shared connection
        self._vis_repo = VisualizationRepository(read_only=False, conn=conn)
        self._client_repo = ClientGrantRepository(read_only=False, conn=conn)
        self._cache_repo = VisualizationCacheRepository(read_only=False, conn=conn)
        self._form_repo = FormRepository(conn=conn)
        self._view_repo = ViewRepository(conn=conn)

        # Services (with injected repos)
        self.visualizations = VisualizationService(
            vis_repo=self._vis_repo,
            client_repo=self._client_repo,
            cache_repo=self._cache_repo,
            form_repo=self._form_repo,
            view_repo=self._view_repo,
        )

        # Host hooks
        self.hooks = HookRegistry()
        self.hooks.register(DELETE_FORM, self.visualizations.on_form_deleted)

        self._initialized = True


# Global container instance
container = Container()
