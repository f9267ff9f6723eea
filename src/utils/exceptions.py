"""
Error taxonomy shared by the service layer and the API error handlers
"""

from typing import Dict, Optional


class ValidationError(Exception):
    """Caller input violates one or more field constraints"""

    def __init__(self, errors: Dict[str, str]):
        super().__init__("; ".join(f"{field}: {message}" for field, message in errors.items()))
        self.errors = dict(errors)

    @property
    def fields(self):
        return set(self.errors)


class NotFoundError(Exception):
    """Operation targets a record that does not exist"""

    def __init__(self, record_id: int, resource: str = "Employee"):
        super().__init__(f"{resource} {record_id} not found")
        self.record_id = record_id
        self.resource = resource
        self.message = f"{resource} not found"


class StoreError(Exception):
    """Underlying persistence failure; detail stays server-side"""

    def __init__(self, operation: str, detail: Optional[str] = None):
        super().__init__(f"Store operation '{operation}' failed: {detail}")
        self.operation = operation
        self.detail = detail
