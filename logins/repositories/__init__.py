"""Login data access."""
from logins.repositories.base import Finder, Saver, Blocker, Getter, LoginRepository
from logins.repositories.exceptions import (
    LoginRepositoryError,
    LoginNotFoundError,
    EmptyPageError,
    LoginConstraintViolationError,
)
from logins.repositories.sql import SqlLoginRepository, PAGINATION_STRATEGIES

__all__ = [
    "Finder",
    "Saver",
    "Blocker",
    "Getter",
    "LoginRepository",
    "SqlLoginRepository",
    "PAGINATION_STRATEGIES",
    "LoginRepositoryError",
    "LoginNotFoundError",
    "EmptyPageError",
    "LoginConstraintViolationError",
]
