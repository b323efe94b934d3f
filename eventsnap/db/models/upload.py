from sqlalchemy import Column, Integer, BigInteger, String, Boolean, DateTime, ForeignKey, func, Index
from sqlalchemy.orm import relationship
from eventsnap.db.session import Base, utcnow

class GuestUpload(Base):
    __tablename__ = "guest_uploads"
    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False)
    guest_name = Column(String(255), nullable=False)
    file_url = Column(String(1024), nullable=False)
    file_name = Column(String(255), nullable=False)
    file_size = Column(BigInteger, nullable=False)
    mime_type = Column(String(127), nullable=False)
    is_favorited = Column(Boolean, default=False, nullable=False)
    upload_ip = Column(String(64), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    event = relationship("Event")

    __table_args__ = (
        Index('idx_upload_event', 'event_id'),
        # Admission control counts by (event, ip) inside a time window
        Index('idx_upload_event_ip_created', 'event_id', 'upload_ip', 'created_at'),
    )
