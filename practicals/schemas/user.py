from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime
from practicals.models.user import UserRole


class UserBase(BaseModel):
    email: EmailStr
    username: str = Field(..., min_length=3, max_length=50, pattern=r"^[a-zA-Z0-9_-]+$")
    fullName: Optional[str] = Field(None, max_length=255)


class UserCreate(UserBase):
    password: str = Field(..., min_length=6, max_length=72)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        # bcrypt only looks at the first 72 bytes
        if len(value.encode("utf-8")) > 72:
            raise ValueError("Password must be at most 72 bytes")
        return value


class UserUpdate(BaseModel):
    fullName: Optional[str] = Field(None, max_length=255)
    bio: Optional[str] = Field(None, max_length=500)
    avatarUrl: Optional[str] = Field(None, max_length=500)


class UserResponse(BaseModel):
    id: int
    email: str
    username: str
    fullName: Optional[str] = None
    bio: Optional[str] = None
    avatarUrl: Optional[str] = None
    role: UserRole
    createdAt: datetime

    class Config:
        from_attributes = True


class UserProfile(UserResponse):
    followers_count: int = 0
    following_count: int = 0
    videos_count: int = 0


class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class AuthResponse(Token):
    user: UserResponse
