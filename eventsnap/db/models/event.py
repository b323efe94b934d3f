from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, func, Index
from sqlalchemy.orm import relationship
from eventsnap.db.session import Base, utcnow

class Event(Base):
    __tablename__ = "events"
    id = Column(Integer, primary_key=True, autoincrement=True)
    organizer_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    name = Column(String(255), nullable=False)
    topic = Column(String(255), nullable=True)
    text_color = Column(String(32), nullable=True)
    theme_id = Column(Integer, ForeignKey("event_themes.id"), nullable=True)
    custom_theme_image_url = Column(String(1024), nullable=True)
    event_date = Column(DateTime(timezone=True), nullable=False)
    event_time = Column(String(32), nullable=True)
    address = Column(String(255), nullable=True)
    postcode = Column(String(32), nullable=True)
    city = Column(String(255), nullable=True)
    thank_you_message = Column(Text, nullable=True)
    # Guest capability: generated once at creation, never regenerated
    qr_code_token = Column(String(64), unique=True, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, server_default=func.now(), nullable=False)

    organizer = relationship("User", back_populates="events")
    theme = relationship("EventTheme")

    __table_args__ = (
        Index('idx_event_organizer', 'organizer_id'),
        Index('idx_event_theme', 'theme_id'),
    )
