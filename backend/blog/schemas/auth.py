"""Auth Schemas — login request and session-check response."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    password: str = Field(min_length=1)


class LoginResponse(BaseModel):
    success: bool


class AuthCheckResponse(BaseModel):
    logged: bool
