from sqlalchemy import Column, Integer, Text, DateTime
from mon_ai.models.base import Base, utcnow

class History(Base):
    """A translated sentence. Rows are append-only."""
    __tablename__ = "history"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    en = Column(Text, nullable=False)
    mnw = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
