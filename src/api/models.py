"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.

Request models accept raw strings on purpose: format and strength rules
belong to the domain validators, which report them as Result values.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from src.domain.accumulate import ValidationIssue
from src.domain.errors import DomainError, ErrorKind


class RegisterRequest(BaseModel):
    """Request model for user registration."""

    email: str = Field(..., description="Email address (normalized by the server)")
    password: str = Field(..., description="Password (8+ chars, uppercase, digit)")
    age: int = Field(..., description="Age in years (13-120)")


class RegisterResponse(BaseModel):
    """Response model for successful registration."""

    message: str
    email: str
    age: int


class ValidateRequest(BaseModel):
    """Request model for collect-all validation."""

    email: str
    password: str
    age: int


class ValidateResponse(BaseModel):
    """Response model when every field is valid."""

    message: str
    email: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
    kind: ErrorKind

    @classmethod
    def from_error(cls, error: DomainError) -> "ErrorResponse":
        return cls(detail=error.detail, kind=error.kind)


class IssueModel(BaseModel):
    """One invalid field."""

    field: str
    message: str

    @classmethod
    def from_issue(cls, issue: ValidationIssue) -> "IssueModel":
        return cls(field=issue.field, message=issue.message)


class IssuesResponse(BaseModel):
    """Error response listing every invalid field."""

    issues: list[IssueModel]


class ErrorLogEntryResponse(BaseModel):
    """One recorded failure."""

    timestamp: datetime
    kind: ErrorKind
    detail: str
