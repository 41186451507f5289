"""Client grant table - which client accounts may see private visualizations."""

CLIENT_DDL = """
CREATE TABLE IF NOT EXISTS module_data_visualization_clients (
    vis_id INTEGER NOT NULL,
    account_id INTEGER NOT NULL,
    PRIMARY KEY (vis_id, account_id)
)
"""
