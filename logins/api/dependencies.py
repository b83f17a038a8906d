"""API dependencies."""
from logins.config import get_settings
from logins.database import AsyncSessionLocal
from logins.repositories import LoginRepository, SqlLoginRepository


def get_login_repository() -> LoginRepository:
    """Repository bound to the application session factory."""
    settings = get_settings()
    return SqlLoginRepository(AsyncSessionLocal, strategy=settings.pagination_strategy)
