"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Request Schemas ---


class RegisterUserRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Anderson",
                    "email": "anderson@example.com",
                    "password": "123456",
                }
            ]
        }
    }

    name: str = Field(..., max_length=100)
    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=128)


class LoginRequest(BaseModel):
    model_config = {
        "json_schema_extra": {"examples": [{"email": "anderson@example.com", "password": "123456"}]}
    }

    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=128)


# --- Response Schemas ---


class UserResponse(BaseModel):
    name: str
    email: str


class RegisterUserResponse(BaseModel):
    user: UserResponse


class LoginResponse(BaseModel):
    token: str
    user: UserResponse
