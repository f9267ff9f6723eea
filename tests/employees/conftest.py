"""
pytest configuration and fixtures for the employees test suite

Service and API tests run the real SQL statements against an in-memory
SQLite database exposed through the small slice of the asyncpg pool and
connection API the service layer uses.
"""

import re
import sqlite3
from contextlib import asynccontextmanager
from typing import Any, Iterable, List, Optional, Tuple

import asyncpg
import httpx
import pytest
import pytest_asyncio

from database import connection
from services.employees_service import EmployeesService

SCHEMA = """
    CREATE TABLE employees (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name VARCHAR(100) NOT NULL,
        value INTEGER NOT NULL CHECK (value >= 0)
    )
"""

SEED_SET = [
    ("Alice", 4000),
    ("Bob", 4000),
    ("Charlie", 4000),
    ("Eddie", 10),
    ("Gina", 20),
    ("Zara", 30),
]


def _positional(query: str) -> str:
    # asyncpg numbers its placeholders ($1); SQLite accepts ?1
    return re.sub(r"\$(\d+)", r"?\1", query)


class SQLiteConnection:
    """asyncpg-style connection over a shared sqlite3 handle"""

    def __init__(self, db: sqlite3.Connection):
        self.db = db
        self.queries: List[str] = []
        self.fail_on: List[str] = []

    def _run(self, query: str, params: Iterable[Any]) -> sqlite3.Cursor:
        self.queries.append(query)
        for fragment in self.fail_on:
            if fragment in query:
                raise asyncpg.PostgresError(f"simulated store failure on: {fragment}")
        return self.db.execute(_positional(query), tuple(params))

    async def fetch(self, query: str, *params: Any) -> List[sqlite3.Row]:
        return self._run(query, params).fetchall()

    async def fetchrow(self, query: str, *params: Any) -> Optional[sqlite3.Row]:
        rows = self._run(query, params).fetchall()
        return rows[0] if rows else None

    async def fetchval(self, query: str, *params: Any) -> Any:
        rows = self._run(query, params).fetchall()
        return rows[0][0] if rows else None

    async def execute(self, query: str, *params: Any) -> str:
        cursor = self._run(query, params)
        return f"{query.split()[0].upper()} {cursor.rowcount}"

    async def executemany(self, query: str, args: Iterable[Tuple[Any, ...]]) -> None:
        self.queries.append(query)
        self.db.executemany(_positional(query), list(args))

    @asynccontextmanager
    async def transaction(self):
        self.db.execute("BEGIN")
        try:
            yield
        except BaseException:
            self.db.execute("ROLLBACK")
            raise
        else:
            self.db.execute("COMMIT")


class SQLitePool:
    """asyncpg-style pool handing out a single SQLite-backed connection"""

    def __init__(self):
        self.db = sqlite3.connect(":memory:", check_same_thread=False, isolation_level=None)
        self.db.row_factory = sqlite3.Row
        self.db.execute(SCHEMA)
        self.conn = SQLiteConnection(self.db)

    @asynccontextmanager
    async def acquire(self):
        yield self.conn

    def insert(self, rows: Iterable[Tuple[str, int]]) -> None:
        self.db.executemany("INSERT INTO employees (name, value) VALUES (?, ?)", list(rows))

    def values_by_name(self) -> dict:
        return {row["name"]: row["value"] for row in self.db.execute("SELECT name, value FROM employees")}

    def count(self) -> int:
        return self.db.execute("SELECT COUNT(*) FROM employees").fetchone()[0]

    def close(self) -> None:
        self.db.close()


@pytest.fixture
def store(monkeypatch):
    """Empty employees table installed as the global pool"""
    pool = SQLitePool()
    monkeypatch.setattr(connection, "db_pool", pool)
    yield pool
    pool.close()


@pytest.fixture
def seeded_store(store):
    """Employees table holding the reference seed set"""
    store.insert(SEED_SET)
    return store


@pytest.fixture
def service(store):
    return EmployeesService()


@pytest_asyncio.fixture
async def client(store):
    """HTTP client bound to the ASGI app, without running the lifespan"""
    from app import app

    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client
