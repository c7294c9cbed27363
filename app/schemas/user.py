"""User and auth schemas - account API contract."""

from dataclasses import dataclass

from pydantic import BaseModel, EmailStr, Field


@dataclass(frozen=True)
class UserIdentity:
    """The verified acting user, passed explicitly to handlers and services."""

    id: str
    name: str
    email: str


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    # bcrypt accepts max 72 bytes; longer passwords cause 500. Validate here for a clear 400.
    password: str = Field(..., min_length=1, max_length=72)


class LoginRequest(BaseModel):
    email: str
    password: str


class UserResponse(BaseModel):
    id: str
    name: str
    email: str

    model_config = {"from_attributes": True}


class AuthResponse(UserResponse):
    token: str
