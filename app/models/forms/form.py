"""Form table - owned by the host platform, read here."""

FORM_DDL = """
CREATE TABLE IF NOT EXISTS forms (
    form_id INTEGER PRIMARY KEY,
    form_name VARCHAR NOT NULL,
    is_complete BOOLEAN NOT NULL DEFAULT FALSE,
    list_order INTEGER
)
"""
