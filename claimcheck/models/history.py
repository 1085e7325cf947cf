# claimcheck/models/history.py

from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey
from . import Base, isoformat_utc, utcnow


class SearchHistory(Base):
    __tablename__ = "search_history"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    text = Column(Text, nullable=False)
    analysis = Column(Text, nullable=False)
    created_at = Column(DateTime, default=utcnow, index=True, nullable=False)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "text": self.text,
            "analysis": self.analysis,
            "createdAt": isoformat_utc(self.created_at),
        }
