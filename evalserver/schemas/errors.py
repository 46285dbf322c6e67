"""
Error response schemas.

Rejected payloads and store failures are both reported in the
``ErrorResponse`` envelope; only validation failures carry ``detail``.
"""

from typing import Any, Dict, Iterable, List, Optional
from pydantic import BaseModel, Field


class ValidationErrorItem(BaseModel):
    """One invalid field of a rejected request."""

    field: Optional[str] = Field(None, description="Dotted location of the field", examples=["body.overall_rating"])
    message: str = Field(..., examples=["Input should be less than or equal to 5"])
    type: str = Field(..., description="Pydantic error type", examples=["less_than_equal"])

    @classmethod
    def from_pydantic(cls, error: Dict[str, Any]) -> "ValidationErrorItem":
        location = error.get("loc")
        return cls(
            field=".".join(str(part) for part in location) if location else None,
            message=error.get("msg", "Validation error"),
            type=error.get("type", "unknown_error"),
        )


class ErrorDetail(BaseModel):
    errors: List[ValidationErrorItem]


class ErrorResponse(BaseModel):
    """Body of every 400 validation response and 500 store failure."""

    status: str = "error"
    message: str = Field(..., examples=["Validation error", "Evaluation data is currently unavailable"])
    detail: Optional[ErrorDetail] = None

    @classmethod
    def for_validation(cls, errors: Iterable[Dict[str, Any]]) -> "ErrorResponse":
        return cls(
            message="Validation error",
            detail=ErrorDetail(errors=[ValidationErrorItem.from_pydantic(e) for e in errors]),
        )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "error",
                    "message": "Validation error",
                    "detail": {
                        "errors": [
                            {"field": "body.teacher_id", "message": "Field required", "type": "missing"},
                            {
                                "field": "body.overall_rating",
                                "message": "Input should be less than or equal to 5",
                                "type": "less_than_equal",
                            },
                        ]
                    },
                }
            ]
        }
    }
