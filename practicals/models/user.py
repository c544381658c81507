from sqlalchemy import Column, BigInteger, Integer, String, DateTime, Enum, Text
from sqlalchemy.orm import relationship
from datetime import datetime
from practicals.database import Base
import enum


class UserRole(str, enum.Enum):
    user = "user"
    admin = "admin"


class User(Base):
    __tablename__ = "Users"

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, index=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    fullName = Column(String(255))
    bio = Column(Text)
    avatarUrl = Column(String(500))
    role = Column(Enum(UserRole), nullable=False, default=UserRole.user)
    createdAt = Column(DateTime, nullable=False, default=datetime.utcnow)
    updatedAt = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    videos = relationship("Video", back_populates="owner", cascade="all, delete-orphan", foreign_keys="Video.ownerId")
    likes = relationship("Like", back_populates="user", cascade="all, delete-orphan")
    comments = relationship("Comment", back_populates="user", cascade="all, delete-orphan")

    # Following/Followers
    following = relationship(
        "Follow",
        foreign_keys="Follow.followerId",
        back_populates="follower",
        cascade="all, delete-orphan"
    )
    followers = relationship(
        "Follow",
        foreign_keys="Follow.followeeId",
        back_populates="followee",
        cascade="all, delete-orphan"
    )
