# taskboard/api/deps.py

import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from taskboard.core.config import Settings, get_settings
from taskboard.core.security import InvalidTokenError, PasswordHasher, TokenService
from taskboard.database import get_db
from taskboard.models.user import User
from taskboard.repositories import TaskRepository, UserRepository
from taskboard.services import AuthService, TaskService


logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="users/login", auto_error=False)


# -------------------------------
# Capabilities
# -------------------------------

def get_password_hasher(settings: Settings = Depends(get_settings)) -> PasswordHasher:
    return PasswordHasher(rounds=settings.bcrypt_rounds)


def get_token_service(settings: Settings = Depends(get_settings)) -> TokenService:
    return TokenService.from_settings(settings)


# -------------------------------
# Services (one set per request, bound to the request's session)
# -------------------------------

def get_auth_service(
    db: Session = Depends(get_db),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    token_service: TokenService = Depends(get_token_service),
) -> AuthService:
    return AuthService(UserRepository(db), password_hasher, token_service)


def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    return TaskService(TaskRepository(db))


# -------------------------------
# Authorization
# -------------------------------

def get_current_user(
    token: str | None = Depends(oauth2_scheme),
    token_service: TokenService = Depends(get_token_service),
    db: Session = Depends(get_db),
) -> User:
    unauthorized = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if not token:
        raise unauthorized

    try:
        payload = token_service.decode(token)
    except InvalidTokenError as e:
        logger.info("Rejected bearer token: %s", e)
        raise unauthorized

    user = UserRepository(db).find_by_id(payload["sub"])
    if user is None:
        raise unauthorized
    return user
