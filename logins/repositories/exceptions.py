"""Login repository exceptions."""
from typing import Any


class LoginRepositoryError(Exception):
    """Base class for repository errors."""


class LoginNotFoundError(LoginRepositoryError):
    """No record matched the lookup key."""

    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        super().__init__(f"Login with {field} '{value}' not found")


class EmptyPageError(LoginRepositoryError):
    """Requested page lies past the last record."""

    def __init__(self, page: int, limit: int):
        self.page = page
        self.limit = limit
        super().__init__(f"Page {page} (limit {limit}) is empty")


class LoginConstraintViolationError(LoginRepositoryError):
    """Write rejected by a uniqueness constraint."""

    def __init__(self, login: str):
        self.login = login
        super().__init__(f"Login '{login}' already exists")
