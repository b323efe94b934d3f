from sqlalchemy import Column, Integer, String, Boolean, DateTime, func
from eventsnap.db.session import Base, utcnow

class EventTheme(Base):
    __tablename__ = "event_themes"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    is_standard = Column(Boolean, default=False, nullable=False)
    image_url = Column(String(1024), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
