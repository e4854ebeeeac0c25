"""
Validation report models.
Response shapes for surfacing a validation outcome to callers.
"""

from pydantic import BaseModel, field_validator
from typing import Optional, List, Dict, Any
from datetime import datetime

from ..core.validator import ValidationResult


class ValidationFieldError(BaseModel):
    field: str
    code: str
    message: str
    value: Any = None

    @field_validator('message')
    @classmethod
    def message_must_not_be_empty(cls, v):
        if not v.strip():
            raise ValueError('message cannot be empty')
        return v


class ValidationErrorResponse(BaseModel):
    error_type: str = "VALIDATION_ERROR"
    message: str
    errors: List[ValidationFieldError]
    timestamp: Optional[datetime] = None

    def __init__(self, **data):
        data.setdefault("timestamp", datetime.now())
        super().__init__(**data)

    @classmethod
    def from_result(cls, result: ValidationResult) -> "ValidationErrorResponse":
        """Build the error report for a rejected validation result."""
        if result.ok:
            raise ValueError(f"Validation result for '{result.schema}' has no violations")

        return cls(
            message=result.summary(),
            errors=[
                ValidationFieldError(field=v.path, code=v.code.value, message=v.message, value=v.value)
                for v in result.violations
            ],
        )


class ValidationSuccessResponse(BaseModel):
    success: bool = True
    schema_name: str
    mode: str
    record: Dict[str, Any]

    @classmethod
    def from_result(cls, result: ValidationResult, mode: str) -> "ValidationSuccessResponse":
        return cls(schema_name=result.schema, mode=mode, record=result.record)
