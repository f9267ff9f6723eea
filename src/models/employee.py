"""
Employee-related Pydantic models
"""

from pydantic import BaseModel, ConfigDict, Field

NAME_MAX_LENGTH = 100
INT_COLUMN_MAX = 2147483647  # INTEGER column upper bound, shared by id and value


class EmployeeData(BaseModel):
    id: int
    name: str
    value: int


class EmployeeCreateRequest(BaseModel):
    # Wrong JSON types ("5", true, 5.0) are rejected rather than coerced
    model_config = ConfigDict(strict=True)

    name: str = Field(..., description=f"Employee name, non-blank, at most {NAME_MAX_LENGTH} characters")
    value: int = Field(..., description="Non-negative integer value")


class EmployeeUpdateRequest(BaseModel):
    """Full overwrite of the mutable fields; both are always replaced"""
    model_config = ConfigDict(strict=True)

    name: str = Field(..., description=f"Employee name, non-blank, at most {NAME_MAX_LENGTH} characters")
    value: int = Field(..., description="Non-negative integer value")


class AbcSumResponse(BaseModel):
    """Result of the increment rule when the A/B/C sum meets the threshold"""
    sum: int
