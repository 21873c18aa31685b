"""Database schema DDL for the ``products`` table, per backend.

Every statement is idempotent so ``Database.init()`` can run on each start.
"""

SQLITE_DDL = [
    """
    CREATE TABLE IF NOT EXISTS products (
        id      TEXT PRIMARY KEY,
        name    TEXT NOT NULL,
        price   REAL NOT NULL
    )
    """,
]

MYSQL_DDL = [
    """
    CREATE TABLE IF NOT EXISTS products (
        id      VARCHAR(36)  NOT NULL PRIMARY KEY,
        name    VARCHAR(255) NOT NULL,
        price   DOUBLE       NOT NULL
    )
    """,
]

SCHEMA_DDL = {
    "sqlite": SQLITE_DDL,
    "mysql": MYSQL_DDL,
}
