"""Login model."""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Uuid
from logins.database import Base


class Login(Base):
    """Login identity record."""

    __tablename__ = "logins"

    id = Column(Integer, primary_key=True, autoincrement=True)
    uuid = Column(Uuid, unique=True, nullable=False, index=True)
    login = Column(String(255), unique=True, nullable=False, index=True)
    banned = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=True)
    updated_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<Login(id={self.id}, uuid={self.uuid}, login={self.login}, banned={self.banned})>"
