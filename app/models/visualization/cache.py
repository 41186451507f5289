"""Visualization cache table - one rendered snapshot per visualization.

No key on vis_id: rows are only ever replaced by delete + insert.
"""

CACHE_DDL = """
CREATE TABLE IF NOT EXISTS module_data_visualization_cache (
    vis_id INTEGER NOT NULL,
    last_cached TIMESTAMP NOT NULL,
    data JSON NOT NULL
)
"""
