# claimcheck/models/user.py

from sqlalchemy import Column, Integer, String, DateTime
from . import Base, isoformat_utc, utcnow


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Registered account.
    Username and email are each unique; only the bcrypt hash of the password is kept.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    def to_public(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "createdAt": isoformat_utc(self.created_at),
        }
