"""
Employee Service: Pydantic Request/Response Schemas
====================================================

What:  Pydantic models defining the API contract for the employee routes.
How:   FastAPI uses these models to serialize responses and generate the
       OpenAPI document. Request bodies are checked by
       services.employee_validation rather than by FastAPI's automatic 422
       handling, so a bad payload maps to a plain 400.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class EmployeeResponse(BaseModel):
    """
    What:  One element of the GET /api/employees array.
    Example:
        {"id": 1, "name": "Alice"}
    """
    id: int = Field(description="Store-generated identifier")
    name: str = Field(description="Employee name")

    model_config = {"from_attributes": True}


class EmployeeCreate(BaseModel):
    """
    What:  The accepted shape of a POST /api/addemployee body.
    Note:  `id` is tolerated for compatibility but never persisted; the store
           always assigns a fresh one. Property names match case-insensitively,
           so {"Name": "Alice"} binds like {"name": "Alice"}.
    """
    name: str = Field(description="Employee name (required, non-blank)")
    id: int = Field(
        default=0,
        description="Ignored. The store generates identifiers.",
    )

    @model_validator(mode="before")
    @classmethod
    def fold_property_names(cls, data: Any) -> Any:
        # Non-objects fall through to the dict type check
        if isinstance(data, dict):
            return {str(key).casefold(): value for key, value in data.items()}
        return data

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class ValidationResult(BaseModel):
    """
    What:  Outcome of validate_employee_payload().
    How:   `employee` is populated only when `errors` is empty.
    """
    errors: List[str] = Field(default_factory=list)
    employee: Optional[EmployeeCreate] = None

    @property
    def is_valid(self) -> bool:
        return not self.errors
