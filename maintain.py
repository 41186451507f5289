#!/usr/bin/env python3
"""
Maintenance tasks for the visualization tables.

Usage:
    python maintain.py init              # Create tables in the DB
    python maintain.py delete-form 12    # Run the form deletion cleanup for form 12
    python maintain.py show-index        # Print the forms/Views page index
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from loguru import logger

from app.container import container
from app.hooks import DELETE_FORM
from app.repositories.db import close_db, connect
from settings import DB_PATH
from settings.logging import setup_logging


def run_init() -> None:
    """Create all tables."""
    connect(DB_PATH).close()
    logger.info("Tables ready in {}", DB_PATH)


def run_delete_form(form_id: str) -> None:
    """Fire the delete_form hook for a form."""
    container.init()
    handled = container.hooks.fire(DELETE_FORM, {"form_id": form_id})
    logger.info("delete_form {} handled by {} hook(s)", form_id, handled)


def run_show_index() -> None:
    """Print the page index script."""
    container.init()
    print(container.visualizations.get_form_view_mapping_js())


def main(args: list[str] | None = None) -> int:
    args = sys.argv[1:] if args is None else args
    if not args:
        print(__doc__)
        return 1

    setup_logging()
    command = args[0]
    try:
        if command == "init":
            run_init()
        elif command == "delete-form" and len(args) == 2:
            run_delete_form(args[1])
        elif command == "show-index":
            run_show_index()
        else:
            print(__doc__)
            return 1
    finally:
        close_db()
    return 0


if __name__ == "__main__":
    sys.exit(main())
