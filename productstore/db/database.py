"""Core database connection with per-statement transactions.

One ``Database`` owns one DB-API connection, opened lazily from a connection
URL.  SQL throughout the package is written with ``?`` placeholders and is
rewritten here for drivers that use the ``format`` paramstyle.
"""

from __future__ import annotations

import importlib
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from types import ModuleType
from typing import Any, Generator, Optional
from urllib.parse import unquote, urlsplit

from productstore.config import get_database_config, mask_url
from productstore.db.schema import SCHEMA_DDL
from productstore.errors import (
    ConstraintViolationError,
    StatementError,
    StoreConnectionError,
)

logger = logging.getLogger(__name__)

# pymysql client error codes that mean the server went away mid-statement
_MYSQL_CONNECTION_LOST = {2003, 2006, 2013}


class Database:
    """
    DB-API wrapper for the product store (MySQL or SQLite).

    Every mutation goes through ``transaction()``, which commits on success
    and rolls back on failure.  Use as a context manager to guarantee the
    connection is released on every exit path.
    """

    def __init__(self, url: Optional[str] = None, timeout: Optional[float] = None):
        if url is None:
            cfg = get_database_config()
            url = cfg.url
            timeout = cfg.timeout if timeout is None else timeout
        self.url = url
        self.timeout = timeout
        self.backend = self._backend_for(url)
        self._driver: Optional[ModuleType] = None
        self._conn: Optional[Any] = None

    def __repr__(self) -> str:
        return f"Database({mask_url(self.url)!r})"

    @staticmethod
    def _backend_for(url: str) -> str:
        scheme = urlsplit(url).scheme.lower()
        if scheme in ("mysql", "mysql+pymysql"):
            return "mysql"
        if scheme == "sqlite":
            return "sqlite"
        raise StoreConnectionError(f"Unsupported database URL scheme: {scheme or url!r}")

    # -- connection lifecycle --------------------------------------------------

    def connection(self) -> Any:
        if self._conn is None:
            if self.backend == "sqlite":
                self._conn = self._connect_sqlite()
            else:
                self._conn = self._connect_mysql()
            logger.info(f"Connected to {mask_url(self.url)}")
        return self._conn

    def _sqlite_path(self) -> str:
        # sqlite:///data/app.db -> "data/app.db"; sqlite:////abs/app.db -> "/abs/app.db"
        path = unquote(urlsplit(self.url).path)
        path = path[1:] if path.startswith("/") else path
        if not path:
            raise StoreConnectionError(f"SQLite URL has no database path: {self.url!r}")
        return path

    def _connect_sqlite(self) -> sqlite3.Connection:
        self._driver = sqlite3
        path = self._sqlite_path()
        if path != ":memory:":
            Path(path).parent.mkdir(parents=True, exist_ok=True)
        kwargs: dict[str, Any] = {}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        try:
            conn = sqlite3.connect(path, **kwargs)
            conn.row_factory = sqlite3.Row
            conn.execute("PRAGMA foreign_keys = ON")
        except sqlite3.Error as exc:
            raise StoreConnectionError(f"Cannot open SQLite database {path}: {exc}") from exc
        return conn

    def _connect_mysql(self) -> Any:
        try:
            pymysql = importlib.import_module("pymysql")
        except ImportError as exc:
            raise StoreConnectionError(
                "MySQL URLs need the 'mysql' extra: pip install productstore[mysql]"
            ) from exc
        self._driver = pymysql

        parts = urlsplit(self.url)
        database = parts.path.lstrip("/")
        if not database:
            raise StoreConnectionError(f"MySQL URL has no database name: {mask_url(self.url)}")
        kwargs: dict[str, Any] = {
            "host": parts.hostname or "localhost",
            "port": parts.port or 3306,
            "user": unquote(parts.username or ""),
            "password": unquote(parts.password or ""),
            "database": database,
            "cursorclass": pymysql.cursors.DictCursor,
            # rowcount reports matched rows, not only changed ones
            "client_flag": pymysql.constants.CLIENT.FOUND_ROWS,
            # reads run outside transaction() and must not pin a snapshot
            "autocommit": True,
        }
        if self.timeout is not None:
            # pymysql takes whole seconds for connect_timeout
            kwargs["connect_timeout"] = max(1, int(self.timeout))
            kwargs["read_timeout"] = self.timeout
            kwargs["write_timeout"] = self.timeout
        try:
            return pymysql.connect(**kwargs)
        except pymysql.Error as exc:
            raise StoreConnectionError(
                f"Cannot connect to {mask_url(self.url)}: {exc}"
            ) from exc

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.debug(f"Closed connection to {mask_url(self.url)}")

    def __enter__(self) -> "Database":
        self.connection()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def init(self) -> None:
        """Create all tables (idempotent)."""
        with self.transaction():
            for ddl in SCHEMA_DDL[self.backend]:
                self.execute(ddl)
        logger.info(f"Schema ready on {mask_url(self.url)}")

    # -- transaction helpers ---------------------------------------------------

    @contextmanager
    def transaction(self) -> Generator[Any, None, None]:
        """Commit on success, roll back on exception."""
        conn = self.connection()
        try:
            yield conn
            conn.commit()
        except Exception as exc:
            try:
                conn.rollback()
            except Exception as rollback_exc:
                # the driver already dropped the socket; reconnect on next use
                logger.warning(f"Rollback failed, discarding connection: {rollback_exc}")
                self._conn = None
            if self._driver is not None and isinstance(exc, self._driver.Error):
                raise self._translate(exc, "COMMIT") from exc
            raise

    # -- low-level query helpers -----------------------------------------------

    def _sql(self, sql: str) -> str:
        if self.backend == "mysql":
            return sql.replace("%", "%%").replace("?", "%s")
        return sql

    def execute(self, sql: str, params: tuple = ()) -> Any:
        """Run one statement and return its cursor (``rowcount`` is populated)."""
        conn = self.connection()
        cursor = conn.cursor()
        try:
            cursor.execute(self._sql(sql), params)
        except Exception as exc:
            cursor.close()
            raise self._translate(exc, sql) from exc
        return cursor

    def fetchone(self, sql: str, params: tuple = ()) -> Optional[dict[str, Any]]:
        cursor = self.execute(sql, params)
        try:
            row = cursor.fetchone()
        finally:
            cursor.close()
        return dict(row) if row else None

    def fetchall(self, sql: str, params: tuple = ()) -> list[dict[str, Any]]:
        cursor = self.execute(sql, params)
        try:
            rows = cursor.fetchall()
        finally:
            cursor.close()
        return [dict(r) for r in rows]

    def _translate(self, exc: Exception, sql: str) -> Exception:
        driver = self._driver
        statement = " ".join(sql.split())
        if driver is None or not isinstance(exc, driver.Error):
            return StatementError(f"{statement}: {exc}")
        if isinstance(exc, driver.IntegrityError):
            return ConstraintViolationError(f"{statement}: {exc}")
        if self.backend == "mysql" and isinstance(exc, (driver.OperationalError, driver.InterfaceError)):
            code = exc.args[0] if exc.args else None
            if code in _MYSQL_CONNECTION_LOST or isinstance(exc, driver.InterfaceError):
                return StoreConnectionError(f"Connection lost during {statement}: {exc}")
        return StatementError(f"{statement}: {exc}")
