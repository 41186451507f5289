"""Form View table - owned by the host platform, read here."""

VIEW_DDL = """
CREATE TABLE IF NOT EXISTS form_views (
    view_id INTEGER PRIMARY KEY,
    form_id INTEGER NOT NULL,
    view_name VARCHAR NOT NULL,
    view_order INTEGER
)
"""

VIEW_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_form_views_form ON form_views(form_id)",
]
