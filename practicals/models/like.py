from sqlalchemy import Column, BigInteger, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from practicals.database import Base


class Like(Base):
    __tablename__ = "Likes"

    userId = Column(BigInteger, ForeignKey("Users.id", ondelete="CASCADE"), primary_key=True)
    videoId = Column(BigInteger, ForeignKey("Videos.id", ondelete="CASCADE"), primary_key=True, index=True)
    createdAt = Column(DateTime, nullable=False, default=datetime.utcnow)

    # Relationships
    user = relationship("User", back_populates="likes")
    video = relationship("Video", back_populates="likes")
