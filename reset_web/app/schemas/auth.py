"""
Pydantic models for authentication.

The backend answers a successful login with a bearer token and,
optionally, a minimal user record.  Older backend builds used camelCase
(``accessToken``); both spellings are accepted.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator


class SessionUser(BaseModel):
    """Minimal user record kept in the session storage."""

    id: str = ""
    name: str = ""
    email: str = ""
    role: str = ""

    model_config = {
        "extra": "ignore",
        "coerce_numbers_to_str": True,
    }


class LoginRequest(BaseModel):
    email: str = Field(..., examples=["admin@resetmultiservicios.com"])
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: Optional[SessionUser] = None

    @model_validator(mode="before")
    @classmethod
    def _accept_camel_case(cls, data: Any) -> Any:
        if isinstance(data, dict) and "access_token" not in data:
            data = dict(data)
            if "accessToken" in data:
                data["access_token"] = data["accessToken"]
            if "tokenType" in data:
                data["token_type"] = data["tokenType"]
        return data
