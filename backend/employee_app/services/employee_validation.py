"""
Employee Service: Create Payload Validation
============================================

What:  Checks POST /api/addemployee bodies against EmployeeCreate.
How:   Runs the pydantic model in strict mode, so no coercion happens
       ("1" is not an id, 5 is not a name), and folds every failure into a
       ValidationResult instead of raising.

Rules (declared on EmployeeCreate):
    - body must be a JSON object
    - `name` is required, must be a string, and must not be blank
    - `id` is optional; if present it must be an integer, not null
      (it is never persisted either way)
    - property names match case-insensitively; unknown keys are ignored
"""

from typing import Any

from pydantic import ValidationError

from employee_app.schemas.employee import EmployeeCreate, ValidationResult


def validate_employee_payload(payload: Any) -> ValidationResult:
    """
    Validate a decoded create body.

    Args:
        payload: Whatever json.loads produced for the request body.

    Returns:
        ValidationResult with `employee` set when the payload is acceptable,
        otherwise with one "<field>: <message>" entry per failed rule.
    """
    try:
        employee = EmployeeCreate.model_validate(payload, strict=True)
    except ValidationError as e:
        return ValidationResult(errors=[_describe(error) for error in e.errors()])

    return ValidationResult(employee=employee)


def _describe(error: dict) -> str:
    field = ".".join(str(part) for part in error["loc"]) or "body"
    return f"{field}: {error['msg']}"
