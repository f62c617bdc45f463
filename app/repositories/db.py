"""DuckDB connection management."""

import threading
from pathlib import Path

import duckdb
from loguru import logger

from app.models import ALL_DDL, ANDHRA_PRADESH_DISTRICTS
from settings import DB_PATH

_local = threading.local()


def db_exists(db_path: str = DB_PATH) -> bool:
    """Check if database file exists."""
    return Path(db_path).exists()


def _tables_exist(conn: duckdb.DuckDBPyConnection) -> bool:
    """Check if all tables already exist."""
    try:
        result = conn.execute(
            "SELECT COUNT(*) FROM information_schema.tables "
            "WHERE table_name IN ('district', 'performance', 'api_cache')"
        ).fetchone()
        return result[0] == 3
    except duckdb.Error:
        return False


def seed_districts(conn: duckdb.DuckDBPyConnection) -> None:
    """Insert the canonical district list (idempotent)."""
    conn.executemany(
        "INSERT OR IGNORE INTO district (code, name, state_name, latitude, longitude) VALUES (?, ?, ?, ?, ?)",
        [[d.code, d.name, d.state_name, d.latitude, d.longitude] for d in ANDHRA_PRADESH_DISTRICTS],
    )


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables and seed districts (idempotent - uses IF NOT EXISTS)."""
    if _tables_exist(conn):
        return

    for ddl in ALL_DDL:
        conn.execute(ddl)
    seed_districts(conn)
    logger.info("DB tables initialized")


def _ensure_db_exists(db_path: str) -> None:
    """Create DB with tables if it doesn't exist."""
    if not db_exists(db_path):
        logger.warning("DB not found: {}. Creating empty DB.", db_path)
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        conn = duckdb.connect(db_path)
        init_tables(conn)
        conn.close()


def _connections() -> dict[str, duckdb.DuckDBPyConnection]:
    if not hasattr(_local, "conns"):
        _local.conns = {}
    return _local.conns


def get_db(db_path: str = DB_PATH, read_only: bool = True) -> duckdb.DuckDBPyConnection:
    """Get thread-local connection for a database file."""
    conns = _connections()
    if conns.get(db_path) is None:
        _ensure_db_exists(db_path)
        conn = duckdb.connect(db_path, read_only=read_only)
        if not read_only:
            init_tables(conn)
        conns[db_path] = conn
        logger.debug("DB connected: {} (read_only={})", db_path, read_only)
    return conns[db_path]


def close_db(db_path: str = DB_PATH) -> None:
    """Close thread-local connection."""
    conn = _connections().pop(db_path, None)
    if conn is not None:
        conn.close()
        logger.debug("DB connection closed")
