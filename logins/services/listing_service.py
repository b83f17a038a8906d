"""Paged login listing with total count."""
import asyncio
from dataclasses import dataclass, field
from typing import List, Optional
from logins.models.login import Login
from logins.repositories.base import Getter
from logins.repositories.exceptions import EmptyPageError


@dataclass
class LoginListing:
    """Total record count and one page of records."""
    total_count: int
    records: List[Login] = field(default_factory=list)


async def _page_or_empty(repository: Getter, page: int, limit: int) -> List[Login]:
    try:
        return await repository.page(page, limit)
    except EmptyPageError:
        return []


async def fetch_listing(
    repository: Getter,
    page: int,
    limit: int,
    timeout: Optional[float] = None,
) -> LoginListing:
    """
    Fetch the total count and one page of records concurrently.

    Both reads run as separate tasks and are joined before returning. A page
    past the end yields an empty record list. Any other failure cancels the
    sibling task and is re-raised as-is. The two reads are not taken in one
    snapshot, so concurrent writers may make them disagree.

    Args:
        repository: Source of count and page reads
        page: Zero-based page index
        limit: Records per page
        timeout: Seconds to wait for both reads, no limit when None

    Returns:
        LoginListing with total_count and records
    """
    count_task = asyncio.create_task(repository.count())
    page_task = asyncio.create_task(_page_or_empty(repository, page, limit))
    tasks = [count_task, page_task]

    try:
        done, pending = await asyncio.wait(
            tasks, timeout=timeout, return_when=asyncio.FIRST_EXCEPTION
        )
    except asyncio.CancelledError:
        await _cancel(tasks)
        raise

    await _cancel(pending)

    for task in tasks:
        if task in done and task.exception() is not None:
            raise task.exception()

    if pending:
        raise asyncio.TimeoutError(f"Listing not ready within {timeout}s")

    return LoginListing(total_count=count_task.result(), records=page_task.result())


async def _cancel(tasks) -> None:
    for task in tasks:
        task.cancel()
    # Wait for cancellation to finish so no task outlives the listing call
    await asyncio.gather(*tasks, return_exceptions=True)
