"""Pydantic models for API responses."""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class UserSummary(BaseModel):
    """Public projection of a user. Never carries the password hash."""
    id: str
    name: str
    email: str


class UserProfile(UserSummary):
    model_config = ConfigDict(populate_by_name=True)

    created_at: datetime = Field(..., alias="createdAt")


class RegisterResponse(BaseModel):
    message: str
    user: UserSummary


class LoginResponse(BaseModel):
    message: str
    token: str


class ProfileResponse(BaseModel):
    message: str
    user: UserProfile


class FieldErrorResponse(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    message: str
    errors: list[FieldErrorResponse] | None = None
