"""
Employee management API routes
All database access goes through the employees service layer.
"""

import logging
from typing import List

from fastapi import APIRouter, Response, status

from models.employee import AbcSumResponse, EmployeeCreateRequest, EmployeeData, EmployeeUpdateRequest
from services.employees_service import get_employees_service
from utils.exceptions import NotFoundError

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("", response_model=List[EmployeeData])
async def list_employees():
    """List every employee"""
    employees_service = get_employees_service()
    employees = await employees_service.list_all()
    return employees

@router.post(
    "/increment-and-sum",
    response_model=AbcSumResponse,
    responses={204: {"description": "A/B/C sum is below the threshold"}}
)
async def increment_and_sum():
    """
    Apply the increment rule to all employees and return the A/B/C sum

    Responds 204 with no body when the sum is below the threshold.
    """
    employees_service = get_employees_service()
    total = await employees_service.apply_increment_rule_and_sum_abc()

    if total is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return AbcSumResponse(sum=total)

@router.get("/{employee_id}", response_model=EmployeeData)
async def get_employee(employee_id: int):
    """Get employee details"""
    employees_service = get_employees_service()
    employee = await employees_service.get_by_id(employee_id)

    if employee is None:
        raise NotFoundError(employee_id)

    return employee

@router.post("", response_model=EmployeeData, status_code=status.HTTP_201_CREATED)
async def create_employee(request: EmployeeCreateRequest, response: Response):
    """Create a new employee"""
    employees_service = get_employees_service()
    employee = await employees_service.create(name=request.name, value=request.value)

    response.headers["Location"] = f"/employees/{employee.id}"
    return employee

@router.put("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_employee(employee_id: int, request: EmployeeUpdateRequest):
    """Replace an employee's name and value"""
    employees_service = get_employees_service()
    result = await employees_service.update(employee_id, name=request.name, value=request.value)

    if result.is_not_found:
        raise NotFoundError(employee_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(employee_id: int):
    """Delete an employee"""
    employees_service = get_employees_service()
    result = await employees_service.delete(employee_id)

    if result.is_not_found:
        raise NotFoundError(employee_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
