from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, func, Index
from sqlalchemy.orm import relationship
from eventsnap.db.session import Base, utcnow

class ContactPerson(Base):
    __tablename__ = "contact_persons"
    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False)
    name = Column(String(255), nullable=False)
    phone_number = Column(String(64), nullable=True)
    email = Column(String(255), nullable=True)
    # Shown to guests on the public event page
    is_contact_person = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    event = relationship("Event")

    __table_args__ = (
        Index('idx_contact_event', 'event_id'),
    )
