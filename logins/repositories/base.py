"""Login repository contracts."""
from abc import ABC, abstractmethod
from typing import List
from uuid import UUID
from logins.models.login import Login


class Finder(ABC):
    """Single-record lookups."""

    @abstractmethod
    async def find_by_uuid(self, uuid: UUID) -> Login:
        pass

    @abstractmethod
    async def find_by_login(self, login: str) -> Login:
        pass


class Saver(ABC):
    """Record creation and replacement."""

    @abstractmethod
    async def insert(self, login: Login) -> Login:
        pass

    @abstractmethod
    async def update(self, login: Login) -> Login:
        pass


class Blocker(ABC):
    """Ban operations."""

    @abstractmethod
    async def ban_by_uuid(self, uuid: UUID) -> bool:
        pass


class Getter(ABC):
    """Listing reads."""

    @abstractmethod
    async def count(self) -> int:
        pass

    @abstractmethod
    async def page(self, page: int, limit: int) -> List[Login]:
        """
        Return one page of records ordered by insertion.

        Pages are zero-based. Raises EmptyPageError when the page has no rows.
        """
        pass


class LoginRepository(Finder, Saver, Blocker, Getter):
    """Full repository contract."""
