"""
Employees service - business logic for employee records and the increment rule
"""

import logging
from typing import Any, List, Optional, Tuple

from models.employee import EmployeeData, INT_COLUMN_MAX, NAME_MAX_LENGTH
from services.base_service import BaseService, ServiceResult
from utils.exceptions import ValidationError

logger = logging.getLogger(__name__)

# Mutation partition: first matching prefix wins, everything else gets the default
INCREMENT_RULES: Tuple[Tuple[str, int], ...] = (
    ("E", 1),
    ("G", 10),
)
DEFAULT_INCREMENT = 100

# Reporting filter, independent of the mutation partition
SUM_PREFIXES: Tuple[str, ...] = ("A", "B", "C")
SUM_THRESHOLD = 11171

LIST_EMPLOYEES = "SELECT id, name, value FROM employees ORDER BY id"
GET_EMPLOYEE = "SELECT id, name, value FROM employees WHERE id = $1"
INSERT_EMPLOYEE = "INSERT INTO employees (name, value) VALUES ($1, $2) RETURNING id, name, value"
UPDATE_EMPLOYEE = "UPDATE employees SET name = $1, value = $2 WHERE id = $3 RETURNING id, name, value"
DELETE_EMPLOYEE = "DELETE FROM employees WHERE id = $1"


def _sql_literal(text: str) -> str:
    return "'" + text.replace("'", "''") + "'"


def _first_char_equals(prefix: str) -> str:
    # substr comparison is a literal, case-sensitive match (LIKE may be collation dependent)
    return f"substr(name, 1, 1) = {_sql_literal(prefix)}"


def build_increment_statement() -> str:
    """Single set-based UPDATE applying the prefix increments to every row"""
    branches = " ".join(
        f"WHEN {_first_char_equals(prefix)} THEN value + {amount}"
        for prefix, amount in INCREMENT_RULES
    )
    return f"UPDATE employees SET value = CASE {branches} ELSE value + {DEFAULT_INCREMENT} END"


def build_abc_sum_statement() -> str:
    """Aggregate over the reporting prefixes; an empty set sums to 0"""
    prefixes = ", ".join(_sql_literal(prefix) for prefix in SUM_PREFIXES)
    return f"SELECT COALESCE(SUM(value), 0) FROM employees WHERE substr(name, 1, 1) IN ({prefixes})"


INCREMENT_ALL_VALUES = build_increment_statement()
SUM_ABC_VALUES = build_abc_sum_statement()


def validate_employee_fields(name: Any, value: Any) -> str:
    """
    Check the caller-supplied fields of an employee record

    Args:
        name: Employee name; must be non-blank after trimming and at most
            NAME_MAX_LENGTH characters
        value: Employee value; must be a non-negative integer

    Returns:
        The trimmed name to store

    Raises:
        ValidationError: listing every offending field
    """
    errors = {}

    if not isinstance(name, str) or not name.strip():
        errors["name"] = "Name is required."
    else:
        name = name.strip()
        if len(name) > NAME_MAX_LENGTH:
            errors["name"] = f"Name cannot be longer than {NAME_MAX_LENGTH} characters."

    if isinstance(value, bool) or not isinstance(value, int):
        errors["value"] = "Value must be an integer."
    elif value < 0 or value > INT_COLUMN_MAX:
        errors["value"] = "Value must be a non-negative integer."

    if errors:
        raise ValidationError(errors)

    return name


def is_assignable_id(employee_id: int) -> bool:
    """Whether the store could ever have assigned this ID (SERIAL starts at 1)"""
    return 1 <= employee_id <= INT_COLUMN_MAX


class EmployeesService(BaseService):
    """Service for employee record operations"""

    def __init__(self):
        super().__init__("employees")

    async def list_all(self) -> List[EmployeeData]:
        """Return every employee record in store order"""
        rows = await self.fetch_all("list_employees", LIST_EMPLOYEES)
        logger.info(f"Retrieved {len(rows)} employees")
        return [EmployeeData(**row) for row in rows]

    async def get_by_id(self, employee_id: int) -> Optional[EmployeeData]:
        """
        Get an employee by ID

        Returns:
            The employee, or None when no record has that ID
        """
        if not is_assignable_id(employee_id):
            logger.info(f"Employee {employee_id} not found (outside ID range)")
            return None

        row = await self.fetch_one("get_employee", GET_EMPLOYEE, employee_id)
        if row is None:
            logger.info(f"Employee {employee_id} not found")
            return None
        return EmployeeData(**row)

    async def create(self, name: str, value: int) -> EmployeeData:
        """
        Create a new employee

        Args:
            name: Name of the employee
            value: Non-negative value of the employee

        Returns:
            The created employee including its store-assigned ID
        """
        name = validate_employee_fields(name, value)

        row = await self.fetch_one("create_employee", INSERT_EMPLOYEE, name, value, transactional=True)
        if row is None:
            raise RuntimeError("Insert operation failed - no data returned")

        employee = EmployeeData(**row)
        logger.info(f"Created employee {employee.name} with ID {employee.id}")
        return employee

    async def update(self, employee_id: int, name: str, value: int) -> ServiceResult:
        """
        Overwrite both name and value of an existing employee

        Never creates a record: a missing ID yields a not-found result.
        """
        name = validate_employee_fields(name, value)

        if not is_assignable_id(employee_id):
            logger.info(f"Update skipped - employee {employee_id} outside ID range")
            return ServiceResult.not_found(self.resource_name, employee_id)

        row = await self.fetch_one("update_employee", UPDATE_EMPLOYEE, name, value, employee_id, transactional=True)
        if row is None:
            logger.info(f"Update skipped - employee {employee_id} not found")
            return ServiceResult.not_found(self.resource_name, employee_id)

        logger.info(f"Updated employee {employee_id}")
        return ServiceResult(success=True)

    async def delete(self, employee_id: int) -> ServiceResult:
        """Delete an employee; a missing ID yields a not-found result"""
        if not is_assignable_id(employee_id):
            logger.info(f"Delete skipped - employee {employee_id} outside ID range")
            return ServiceResult.not_found(self.resource_name, employee_id)

        deleted = await self.execute("delete_employee", DELETE_EMPLOYEE, employee_id)
        if deleted == 0:
            logger.info(f"Delete skipped - employee {employee_id} not found")
            return ServiceResult.not_found(self.resource_name, employee_id)

        logger.info(f"Deleted employee {employee_id}")
        return ServiceResult(success=True)

    async def apply_increment_rule_and_sum_abc(self) -> Optional[int]:
        """
        Apply the prefix increment rule to every employee, then report the A/B/C sum

        Every value is raised by 1 (name starts with "E"), 10 ("G") or 100
        (anything else) in one UPDATE. Afterwards the values of employees
        whose name starts with "A", "B" or "C" are summed. Both statements
        share one transaction; a failed UPDATE raises StoreError before the
        sum is read.

        Returns:
            The A/B/C sum when it is at least SUM_THRESHOLD, otherwise None
        """
        async with self.connection("increment_rule", transactional=True) as conn:
            await conn.execute(INCREMENT_ALL_VALUES)
            total = await conn.fetchval(SUM_ABC_VALUES)

        total = int(total or 0)
        if total >= SUM_THRESHOLD:
            logger.info(f"ABC sum after increment: {total}")
            return total

        logger.info(f"ABC sum after increment below threshold (value: {total})")
        return None

# Global service instance
_employees_service: Optional[EmployeesService] = None

def get_employees_service() -> EmployeesService:
    """Get the global employees service instance"""
    global _employees_service
    if _employees_service is None:
        _employees_service = EmployeesService()
    return _employees_service
