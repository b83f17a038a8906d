"""SQLAlchemy models."""
from logins.models.login import Login

__all__ = ["Login"]
