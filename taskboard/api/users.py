# taskboard/api/users.py

import re

from fastapi import APIRouter, Depends
from pydantic import BaseModel, EmailStr, Field, field_validator

from taskboard.api.deps import get_auth_service, get_current_user
from taskboard.api.responses import envelope
from taskboard.models.user import User
from taskboard.schemas import UserInfo
from taskboard.services import AuthService


router = APIRouter(prefix="/users", tags=["users"])

_PASSWORD_RULE = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d).{8,}$")


class RegisterRequest(BaseModel):
    username: str = Field(
        ...,
        max_length=100,
        pattern=r"^[a-zA-Z0-9_.-]*$",
        description="Letters, numbers and _ . - only.",
    )
    email: EmailStr
    password: str = Field(..., min_length=8)

    @field_validator("password")
    @classmethod
    def password_strength(cls, value: str) -> str:
        if not _PASSWORD_RULE.match(value):
            raise ValueError(
                "Password must contain at least one uppercase letter, "
                "one lowercase letter, and one number."
            )
        return value


class AuthenticateRequest(BaseModel):
    identifier: str = Field(..., description="Username or email.")
    password: str


@router.post("/register")
def register(req: RegisterRequest, auth: AuthService = Depends(get_auth_service)):
    result = auth.register_user(req.username, req.email, req.password)
    return envelope(result)


@router.post("/login")
def login(req: AuthenticateRequest, auth: AuthService = Depends(get_auth_service)):
    result = auth.authenticate_user(req.identifier, req.password)
    return envelope(result)


@router.get("/me", response_model=UserInfo)
def read_users_me(current_user: User = Depends(get_current_user)):
    return UserInfo.model_validate(current_user)
