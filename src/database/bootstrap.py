"""
Schema creation and first-run seeding for the employees table
"""

import logging

from database.connection import get_db_pool
from database.seed_data import SEED_EMPLOYEES

logger = logging.getLogger(__name__)

CREATE_EMPLOYEES_TABLE = """
    CREATE TABLE IF NOT EXISTS employees (
        id SERIAL PRIMARY KEY,
        name VARCHAR(100) NOT NULL,
        value INTEGER NOT NULL CHECK (value >= 0)
    )
"""

COUNT_EMPLOYEES = "SELECT COUNT(*) FROM employees"

INSERT_SEED_EMPLOYEE = "INSERT INTO employees (name, value) VALUES ($1, $2)"


async def bootstrap_database(seed: bool = True) -> int:
    """
    Ensure the employees table exists and optionally seed it

    Seeding only happens when the table is empty, so restarts never
    duplicate the seed set.

    Args:
        seed: Load the seed set into an empty table

    Returns:
        Number of seed records inserted
    """
    db_pool = get_db_pool()
    if not db_pool:
        raise RuntimeError("Database pool not initialized")

    async with db_pool.acquire() as conn:
        async with conn.transaction():
            await conn.execute(CREATE_EMPLOYEES_TABLE)

            if not seed:
                logger.info("Employees table ready (seeding disabled)")
                return 0

            existing = await conn.fetchval(COUNT_EMPLOYEES)
            if existing:
                logger.info(f"Employees table already holds {existing} records - skipping seed")
                return 0

            await conn.executemany(INSERT_SEED_EMPLOYEE, SEED_EMPLOYEES)

    logger.info(f"Seeded employees table with {len(SEED_EMPLOYEES)} records")
    return len(SEED_EMPLOYEES)
