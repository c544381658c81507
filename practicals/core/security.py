# Password hashing and JWT issue/verify

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Union

import bcrypt
from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError

from practicals.core.config import settings
from practicals.core.errors import UnauthorizedError

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash, or the password is too long to have produced one
        return False


def create_access_token(subject: Union[str, int], expires_delta: Optional[timedelta] = None) -> str:
    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {
        "sub": str(subject),
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Verify a token signed by create_access_token and return its claims.

    Raises:
        UnauthorizedError: expired token, bad signature or format, missing subject.
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except ExpiredSignatureError:
        logger.warning("Authentication attempt failed: Token expired.")
        raise UnauthorizedError("Token has expired", code="TOKEN_EXPIRED")
    except JWTError as e:
        logger.warning(f"Authentication attempt failed: Invalid token - {e}")
        raise UnauthorizedError("Invalid token", code="INVALID_TOKEN")

    if not payload.get("sub"):
        logger.warning("Authentication attempt failed: 'sub' claim missing from token payload.")
        raise UnauthorizedError("User identifier not found in token", code="INVALID_TOKEN")
    return payload
