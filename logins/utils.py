"""Clock and identifier helpers."""
from datetime import datetime, timezone
from uuid import UUID, uuid4


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def generate_uuid() -> UUID:
    """Fresh random identifier for a new record."""
    return uuid4()
