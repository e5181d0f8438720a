"""
Employee Service: Employee Route Handlers
==========================================

What:  Handles GET /api/employees (list) and POST /api/addemployee (create).
How:   Delegates to the injected DataAccessProvider; validates create bodies
       with validate_employee_payload before anything reaches the store.

Status codes:
    GET  /api/employees     200 always (empty store → [])
    POST /api/addemployee   200 empty body | 400 empty body on invalid payload

    Store failures are not caught here. They propagate to the global
    DatabaseError handler in main.py and surface as a generic 500.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response

from employee_app.exceptions import ValidationFailedError
from employee_app.middleware.request_id import request_id_var
from employee_app.schemas.employee import EmployeeCreate, EmployeeResponse
from employee_app.services.data_access_base import DataAccessProvider
from employee_app.services.data_access_provider import get_data_access_provider
from employee_app.services.employee_validation import validate_employee_payload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Employees"])


@router.get(
    "/employees",
    response_model=List[EmployeeResponse],
    responses={
        200: {"description": "All stored employees"},
        500: {"description": "Store failure"},
    },
    summary="List all employees",
)
async def list_employees(
    provider: DataAccessProvider = Depends(get_data_access_provider),
) -> List[EmployeeResponse]:
    employees = await provider.list_employees()
    return [EmployeeResponse.model_validate(employee) for employee in employees]


async def _read_create_body(request: Request) -> EmployeeCreate:
    """
    Decode and validate the create body.

    Raises:
        ValidationFailedError: body is not JSON or fails the payload rules.
    """
    try:
        payload = await request.json()
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise ValidationFailedError(
            message="Request body is not valid JSON",
            context={"error_type": type(e).__name__},
        ) from e

    result = validate_employee_payload(payload)
    if not result.is_valid:
        raise ValidationFailedError(errors=result.errors)
    return result.employee


@router.post(
    "/addemployee",
    responses={
        200: {"description": "Employee stored (empty body)"},
        400: {"description": "Invalid payload (empty body)"},
        500: {"description": "Store failure"},
    },
    summary="Create an employee",
    description="Stores a new employee. Any `id` in the body is ignored; the store assigns one.",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": EmployeeCreate.model_json_schema()},
            },
        },
    },
)
async def add_employee(
    request: Request,
    provider: DataAccessProvider = Depends(get_data_access_provider),
) -> Response:
    try:
        employee = await _read_create_body(request)
    except ValidationFailedError as e:
        logger.warning(
            "[%s] Rejected employee payload: %s | %s",
            request_id_var.get(""),
            e.message,
            e.context,
        )
        return Response(status_code=400)

    await provider.add_employee(employee.name)
    return Response(status_code=200)
