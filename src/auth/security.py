"""Password hashing and access tokens for hosts."""

from datetime import UTC, datetime, timedelta
from uuid import UUID

import bcrypt
import jwt

from src.auth.dtos import HostDTO, InvalidTokenError
from src.config.settings import settings

BCRYPT_ROUNDS = 12


def hash_password(password: str) -> str:
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_ROUNDS))
    return hashed.decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))


def create_access_token(host: HostDTO, expires_delta: timedelta | None = None) -> str:
    now = datetime.now(UTC)
    expire = now + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    payload = {
        "sub": str(host.id),
        "email": host.email,
        "name": host.name,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> HostDTO:
    """Verify a bearer token and return the host it was issued to.

    Raises:
        InvalidTokenError: bad signature, malformed or expired token.
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
        return HostDTO(id=UUID(payload["sub"]), email=payload["email"], name=payload["name"])
    except (jwt.PyJWTError, KeyError, ValueError) as e:
        raise InvalidTokenError(str(e)) from e
