from sqlalchemy import Column, DateTime, JSON, String, func

from glowboard.db.base import Base


class SettingsDocument(Base):
    """Singleton settings document addressed by a fixed key."""
    __tablename__ = "settings_documents"

    key = Column(String(100), primary_key=True)
    value = Column(JSON, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
