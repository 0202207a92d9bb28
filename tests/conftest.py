"""
Pytest configuration and shared fixtures for namedsql tests.
"""

import pytest

USERS_SQL = """\
/* Queries for the users table.
   -- name: not_a_tag
*/

-- name: create_users
CREATE TABLE users (
    id INTEGER PRIMARY KEY, -- surrogate key
    name TEXT
);

-- name: insert_user
INSERT INTO users (name)
VALUES ('ada');
"""

ORDERS_SQL = """\
-- name: create_orders
CREATE TABLE orders (id INTEGER, user_id INTEGER);

-- name: count_orders
SELECT count(*) FROM orders;
"""


@pytest.fixture
def users_sql():
    """Content of a well-formed query file."""
    return USERS_SQL


@pytest.fixture
def queries_dir(tmp_path):
    """Create a folder with two query files and a nested one."""
    folder = tmp_path / "queries"
    folder.mkdir()
    (folder / "users.sql").write_text(USERS_SQL, encoding="utf-8")
    (folder / "orders.sql").write_text(ORDERS_SQL, encoding="utf-8")
    (folder / "notes.txt").write_text("not a query file", encoding="utf-8")

    nested = folder / "reports"
    nested.mkdir()
    (nested / "daily.sql").write_text(
        "-- name: daily_report\nSELECT 1;\n", encoding="utf-8"
    )
    return folder
