"""Visualization table - saved chart definitions attached to a form View."""

VISUALIZATION_DDL = """
CREATE TABLE IF NOT EXISTS module_data_visualizations (
    vis_id INTEGER PRIMARY KEY,
    vis_name VARCHAR NOT NULL,
    vis_type VARCHAR NOT NULL DEFAULT 'activity',
    chart_type VARCHAR,
    form_id INTEGER NOT NULL,
    view_id INTEGER NOT NULL,
    access_type VARCHAR NOT NULL DEFAULT 'admin',
    export_group_id INTEGER,
    list_order INTEGER
)
"""

VISUALIZATION_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_vis_form_view ON module_data_visualizations(form_id, view_id)",
]
