from sqlalchemy import Column, Integer, String, Boolean, DateTime, func, Enum
from sqlalchemy.orm import relationship
from eventsnap.db.session import Base, utcnow
import enum

class RoleEnum(str, enum.Enum):
    event_organizer = "event_organizer"
    administrator = "administrator"

class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(Enum(RoleEnum), default=RoleEnum.event_organizer, nullable=False)
    subscription_status = Column(String(100), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    # Guest uploads admitted per IP per window, across every event this user organizes
    upload_rate_limit = Column(Integer, default=10, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, server_default=func.now(), nullable=False)

    events = relationship("Event", back_populates="organizer")
