"""Server-side login sessions"""

from datetime import datetime
from sqlalchemy import Column, String, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from app.database import Base


class UserSession(Base):
    """A login session, referenced by the session cookie"""
    __tablename__ = "sessions"

    id = Column(String(64), primary_key=True)  # opaque random token
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Snapshot of the user at login
    role = Column(String(20), nullable=False)
    name = Column(String(255))
    restaurant_id = Column(Uuid)

    expires_at = Column(DateTime, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    user = relationship("User", back_populates="sessions")

    @property
    def is_expired(self) -> bool:
        return self.expires_at <= datetime.utcnow()
