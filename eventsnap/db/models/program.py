from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, func, Index
from sqlalchemy.orm import relationship
from eventsnap.db.session import Base, utcnow

class EventProgram(Base):
    __tablename__ = "event_programs"
    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False)
    topic = Column(String(255), nullable=False)
    time = Column(String(32), nullable=False)
    order_index = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    event = relationship("Event")

    __table_args__ = (
        Index('idx_program_event', 'event_id'),
    )
