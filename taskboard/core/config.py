# taskboard/core/config.py

import os
from dataclasses import dataclass, field
from functools import lru_cache

from dotenv import load_dotenv


load_dotenv()


@dataclass(frozen=True)
class Settings:
    jwt_secret_key: str
    jwt_issuer: str = "taskboard"
    jwt_audience: str = "taskboard-clients"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    bcrypt_rounds: int = 12
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"


def _split_csv(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_settings() -> Settings:
    secret = os.getenv("JWT_SECRET_KEY", "").strip()
    if not secret:
        raise RuntimeError("JWT misconfigured: JWT_SECRET_KEY is required")

    return Settings(
        jwt_secret_key=secret,
        jwt_issuer=os.getenv("JWT_ISSUER", "taskboard").strip(),
        jwt_audience=os.getenv("JWT_AUDIENCE", "taskboard-clients").strip(),
        access_token_expire_minutes=int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")),
        bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", "12")),
        cors_origins=_split_csv(os.getenv("CORS_ORIGINS", "*")) or ["*"],
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
    )


@lru_cache()
def get_settings() -> Settings:
    return load_settings()
