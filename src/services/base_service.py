"""
Base service layer for database operations against the asyncpg pool
"""

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncIterator, Dict, List, Optional

import asyncpg

from database.connection import get_db_pool
from utils.exceptions import StoreError

logger = logging.getLogger(__name__)

# Failures that mean the store itself is unavailable or rejected the statement
STORE_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)

@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    error: Optional[str] = None
    error_type: Optional[str] = None

    @classmethod
    def not_found(cls, resource_name: str, record_id: Any) -> "ServiceResult":
        return cls(
            success=False,
            error=f"{resource_name} record not found with ID: {record_id}",
            error_type="RESOURCE_NOT_FOUND"
        )

    @property
    def is_not_found(self) -> bool:
        return self.error_type == "RESOURCE_NOT_FOUND"

class BaseService:
    """Base service that owns pool access and store error translation for one table"""

    def __init__(self, resource_name: str, table_name: Optional[str] = None):
        self.resource_name = resource_name
        self.table_name = table_name or resource_name
        logger.info(f"BaseService initialized for resource: {resource_name}")

    @asynccontextmanager
    async def connection(self, operation: str, transactional: bool = False) -> AsyncIterator[Any]:
        """
        Acquire a pooled connection, optionally inside a transaction

        Any store-level failure raised while the connection is held is
        re-raised as StoreError with the original exception chained.

        Args:
            operation: Short operation name used in logs and errors
            transactional: Wrap the block in a transaction

        Yields:
            asyncpg connection
        """
        db_pool = get_db_pool()
        if not db_pool:
            raise StoreError(operation, "Database pool not initialized")

        try:
            async with db_pool.acquire() as conn:
                if transactional:
                    async with conn.transaction():
                        yield conn
                else:
                    yield conn
        except STORE_ERRORS as e:
            logger.error(f"{operation} failed for {self.resource_name}: {e}", exc_info=True)
            raise StoreError(operation, str(e)) from e

    async def fetch_all(self, operation: str, query: str, *params: Any) -> List[Dict[str, Any]]:
        """Run a query and return every row as a dict"""
        async with self.connection(operation) as conn:
            logger.debug(f"Executing {operation}: {query} params={list(params)}")
            rows = await conn.fetch(query, *params)
            return [dict(row) for row in rows]

    async def fetch_one(self, operation: str, query: str, *params: Any, transactional: bool = False) -> Optional[Dict[str, Any]]:
        """Run a query and return the first row as a dict, or None"""
        async with self.connection(operation, transactional=transactional) as conn:
            logger.debug(f"Executing {operation}: {query} params={list(params)}")
            row = await conn.fetchrow(query, *params)
            return dict(row) if row else None

    async def execute(self, operation: str, query: str, *params: Any) -> int:
        """
        Run a write statement and return the affected row count

        asyncpg returns a status string such as "DELETE 1" where the
        trailing number is the row count.
        """
        async with self.connection(operation, transactional=True) as conn:
            logger.debug(f"Executing {operation}: {query} params={list(params)}")
            status = await conn.execute(query, *params)
            return _affected_rows(status)


def _affected_rows(status: Optional[str]) -> int:
    if not status:
        return 0
    try:
        return int(status.split()[-1])
    except ValueError:
        return 0
