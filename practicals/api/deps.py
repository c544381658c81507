import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from practicals.core.errors import ForbiddenError, UnauthorizedError
from practicals.core.security import decode_access_token
from practicals.database import get_db
from practicals.models.user import User, UserRole

logger = logging.getLogger(__name__)

# auto_error=False so a missing header goes through our own 401 envelope
token_bearer_scheme = HTTPBearer(auto_error=False)


def _user_from_token(token: str, db: Session) -> User:
    payload = decode_access_token(token)
    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError):
        raise UnauthorizedError("Invalid user identifier format in token", code="INVALID_TOKEN")

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        logger.warning(f"Token subject {user_id} does not match any user")
        raise UnauthorizedError("User no longer exists")
    return user


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(token_bearer_scheme),
    db: Session = Depends(get_db)
) -> User:
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Authentication token missing", code="TOKEN_MISSING")
    return _user_from_token(credentials.credentials, db)


def get_current_user_optional(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(token_bearer_scheme),
    db: Session = Depends(get_db)
) -> Optional[User]:
    if credentials is None or not credentials.credentials:
        return None
    return _user_from_token(credentials.credentials, db)


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != UserRole.admin:
        raise ForbiddenError("Admin privileges required")
    return current_user
