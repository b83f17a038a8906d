"""Database initialization script.

Usage: python scripts/init_db.py [login ...]
"""
import asyncio
import sys

from logins.database import AsyncSessionLocal, init_db
from logins.models import Login
from logins.repositories import SqlLoginRepository, LoginConstraintViolationError


async def init_database(seed_logins):
    """Create all tables and seed the given logins."""
    print("Creating database tables...")
    await init_db()
    print("Tables created successfully!")

    repository = SqlLoginRepository(AsyncSessionLocal)
    for name in seed_logins:
        try:
            login = await repository.insert(Login(login=name))
            print(f"Login created: {login.login} ({login.uuid})")
        except LoginConstraintViolationError:
            print(f"Login already exists: {name}")

    print("Database initialization complete!")


if __name__ == "__main__":
    asyncio.run(init_database(sys.argv[1:]))
