# taskboard/core/security.py

import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from taskboard.core.config import Settings
from taskboard.models.user import User


logger = logging.getLogger(__name__)


class InvalidTokenError(Exception):
    """Raised when a bearer token is malformed, expired or signed for someone else."""


# -------------------------------
# Password hashing
# -------------------------------

class PasswordHasher:
    """One-way bcrypt hashing backed by passlib."""

    def __init__(self, rounds: int = 12):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, hashed_password: str) -> bool:
        try:
            return self._context.verify(password, hashed_password)
        except (ValueError, TypeError):
            # Stored value is not a hash passlib recognises
            logger.warning("Password verification against an unrecognised hash")
            return False


# -------------------------------
# JWT issuance / verification
# -------------------------------

class TokenService:
    """Issues and validates HS256 access tokens carrying the user's identity."""

    def __init__(
        self,
        secret_key: str,
        issuer: str,
        audience: str,
        expires_minutes: int = 60,
        algorithm: str = "HS256",
    ):
        self.secret_key = secret_key
        self.issuer = issuer
        self.audience = audience
        self.expires_delta = timedelta(minutes=expires_minutes)
        self.algorithm = algorithm

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret_key=settings.jwt_secret_key,
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
            expires_minutes=settings.access_token_expire_minutes,
            algorithm=settings.jwt_algorithm,
        )

    def issue(self, user: User) -> str:
        now = datetime.now(timezone.utc)
        claims = {
            "sub": str(user.id),
            "unique_name": user.username,
            "email": user.email,
            "iss": self.issuer,
            "aud": self.audience,
            "iat": now,
            "exp": now + self.expires_delta,
        }
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> dict:
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                audience=self.audience,
                issuer=self.issuer,
            )
        except JWTError as e:
            raise InvalidTokenError(str(e)) from e

        if not payload.get("sub"):
            raise InvalidTokenError("Token has no subject")
        return payload
