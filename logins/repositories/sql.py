"""SQLAlchemy-backed login repository."""
from datetime import datetime
from typing import Any, Callable, List, Optional
from uuid import UUID
from sqlalchemy import select, update, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.sql import Select
from logins.models.login import Login
from logins.repositories.base import LoginRepository
from logins.repositories.exceptions import (
    LoginNotFoundError,
    EmptyPageError,
    LoginConstraintViolationError,
)
from logins.utils import utcnow, generate_uuid

STRATEGY_OFFSET = "offset"
STRATEGY_ID_RANGE = "id_range"
PAGINATION_STRATEGIES = (STRATEGY_OFFSET, STRATEGY_ID_RANGE)

# MySQL ER_DUP_ENTRY
MYSQL_DUPLICATE_ENTRY = 1062


def _is_unique_violation(error: IntegrityError) -> bool:
    """Whether the store rejected a write for a duplicate key."""
    args = getattr(error.orig, "args", ())
    if args and args[0] == MYSQL_DUPLICATE_ENTRY:
        return True
    message = str(error.orig).lower()
    return "unique" in message or "duplicate" in message


class SqlLoginRepository(LoginRepository):
    """
    Login repository over an async SQLAlchemy session factory.

    Every operation opens its own session and runs a single statement, so one
    instance can serve concurrent callers. Errors are raised to the caller
    without logging.

    Args:
        session_factory: Factory producing request-scoped sessions
        clock: Returns the current UTC time for created_at/updated_at stamps
        uuid_factory: Returns a fresh uuid for inserted records
        strategy: Page windowing, "offset" or the deprecated "id_range"
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        clock: Callable[[], datetime] = utcnow,
        uuid_factory: Callable[[], UUID] = generate_uuid,
        strategy: str = STRATEGY_OFFSET,
    ):
        if strategy not in PAGINATION_STRATEGIES:
            raise ValueError(f"Unknown pagination strategy: {strategy}")

        self.session_factory = session_factory
        self.clock = clock
        self.uuid_factory = uuid_factory
        self.strategy = strategy

    async def find_by_uuid(self, uuid: UUID) -> Login:
        return await self._find(select(Login).where(Login.uuid == uuid), "uuid", uuid)

    async def find_by_login(self, login: str) -> Login:
        return await self._find(select(Login).where(Login.login == login), "login", login)

    async def _find(self, query: Select, field: str, value: Any) -> Login:
        async with self.session_factory() as session:
            result = await session.execute(query)
            record = result.scalars().first()

        if record is None:
            raise LoginNotFoundError(field, value)
        return record

    async def insert(self, login: Login) -> Login:
        """Store a new record; uuid and created_at are always assigned here."""
        record = Login(
            uuid=self.uuid_factory(),
            login=login.login,
            banned=bool(login.banned),
            created_at=self.clock(),
            updated_at=None,
        )

        async with self.session_factory() as session:
            session.add(record)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                if _is_unique_violation(e):
                    raise LoginConstraintViolationError(login.login) from e
                raise
            # Reload so the record stays readable once the session closes
            await session.refresh(record)

        return record

    async def update(self, login: Login) -> Login:
        """
        Replace the mutable columns of the record identified by login.uuid.

        created_at is written only when the record carries one, so callers
        should pass back a record they previously read.
        """
        now = self.clock()
        values = {
            "login": login.login,
            "banned": bool(login.banned),
            "updated_at": now,
        }
        if login.created_at is not None:
            values["created_at"] = login.created_at

        statement = (
            update(Login)
            .where(Login.uuid == login.uuid)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        await self._execute_scoped_write(statement, login.uuid, login.login)

        login.updated_at = now
        return login

    async def ban_by_uuid(self, uuid: UUID) -> bool:
        statement = (
            update(Login)
            .where(Login.uuid == uuid)
            .values(banned=True, updated_at=self.clock())
            .execution_options(synchronize_session=False)
        )
        await self._execute_scoped_write(statement, uuid)
        return True

    async def _execute_scoped_write(self, statement, uuid: UUID, login: Optional[str] = None) -> None:
        """Run a uuid-scoped write; zero affected rows means no such record."""
        async with self.session_factory() as session:
            try:
                result = await session.execute(statement)
            except IntegrityError as e:
                await session.rollback()
                if _is_unique_violation(e):
                    raise LoginConstraintViolationError(login) from e
                raise

            if result.rowcount == 0:
                await session.rollback()
                raise LoginNotFoundError("uuid", uuid)

            await session.commit()

    async def count(self) -> int:
        async with self.session_factory() as session:
            result = await session.execute(select(func.count(Login.uuid)))
            return result.scalar_one()

    async def page(self, page: int, limit: int) -> List[Login]:
        if page < 0:
            raise ValueError(f"Page index must be non-negative, got {page}")
        if limit < 1:
            raise ValueError(f"Page limit must be positive, got {limit}")

        query = select(Login).order_by(Login.id)
        if self.strategy == STRATEGY_ID_RANGE:
            # Assumes gapless ids; deleted rows shorten or empty a page
            query = query.where(
                Login.id > page * limit,
                Login.id < (page + 1) * limit + 1,
            )
        else:
            query = query.offset(page * limit).limit(limit)

        async with self.session_factory() as session:
            result = await session.execute(query)
            records = list(result.scalars().all())

        if not records:
            raise EmptyPageError(page, limit)
        return records
