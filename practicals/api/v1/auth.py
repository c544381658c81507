import logging

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy import or_
from sqlalchemy.orm import Session

from practicals.api.deps import get_current_user
from practicals.core.errors import ConflictError, UnauthorizedError
from practicals.core.security import create_access_token, hash_password, verify_password
from practicals.database import get_db
from practicals.models.user import User
from practicals.schemas.user import AuthResponse, Token, UserCreate, UserLogin, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_CREDENTIALS = "Invalid email or password"


def _auth_response(user: User) -> AuthResponse:
    return AuthResponse(
        access_token=create_access_token(user.id),
        user=UserResponse.model_validate(user)
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: UserCreate, db: Session = Depends(get_db)):
    email = user_data.email.lower()

    if db.query(User).filter(User.email == email).first():
        raise ConflictError("Email already registered", code="EMAIL_TAKEN")
    if db.query(User).filter(User.username == user_data.username).first():
        raise ConflictError("Username already taken", code="USERNAME_TAKEN")

    db_user = User(
        email=email,
        username=user_data.username,
        fullName=user_data.fullName,
        password=hash_password(user_data.password)
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)

    logger.info(f"Registered user {db_user.id} ({db_user.email})")
    return _auth_response(db_user)


@router.post("/login", response_model=AuthResponse)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == credentials.email.lower()).first()
    if not user or not verify_password(credentials.password, user.password):
        logger.warning(f"Failed login for {credentials.email}")
        raise UnauthorizedError(INVALID_CREDENTIALS, code="INVALID_CREDENTIALS")

    logger.info(f"User {user.id} logged in")
    return _auth_response(user)


@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db)
):
    # The OAuth2 form calls it "username"; accept either an email or a username
    identifier = form_data.username
    user = db.query(User).filter(
        or_(User.email == identifier.lower(), User.username == identifier)
    ).first()
    if not user or not verify_password(form_data.password, user.password):
        raise UnauthorizedError(INVALID_CREDENTIALS, code="INVALID_CREDENTIALS")

    return Token(access_token=create_access_token(user.id))


@router.get("/me", response_model=UserResponse)
def read_me(current_user: User = Depends(get_current_user)):
    return current_user
