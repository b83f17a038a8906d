"""Login directory API routes."""
import asyncio
from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Header, HTTPException, Query, Response, status
from fastapi.responses import PlainTextResponse
from logins.api.dependencies import get_login_repository
from logins.config import get_settings
from logins.logger import get_logger
from logins.models.login import Login
from logins.repositories import (
    LoginRepository,
    LoginNotFoundError,
    LoginConstraintViolationError,
)
from logins.schemas.login import (
    LoginCreate,
    LoginUpdate,
    LoginResponse,
    BanResponse,
    PageMeta,
    LoginPageResponse,
)
from logins.services import listing_service

COUNT_HEADER = "Pagination-Count"
PAGE_HEADER = "Pagination-Page"
LIMIT_HEADER = "Pagination-Limit"
MAX_PAGE = 1_000_000
MAX_LIMIT = 1000

router = APIRouter()
logger = get_logger("api.logins")


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Login not found",
    )


def _conflict(login: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail=f"Login '{login}' already exists",
    )


@router.put("/login", response_model=LoginResponse, status_code=status.HTTP_201_CREATED)
async def add_login(
    data: LoginCreate,
    repository: LoginRepository = Depends(get_login_repository),
):
    """Create a new login."""
    try:
        login = await repository.insert(Login(login=data.login, banned=data.banned))
    except LoginConstraintViolationError:
        raise _conflict(data.login)

    logger.info(f"Login created: {login.login} ({login.uuid})")
    return login


@router.get("/uuid/{uuid}", response_model=LoginResponse)
async def get_login_by_uuid(
    uuid: UUID,
    repository: LoginRepository = Depends(get_login_repository),
):
    """Get a login by its uuid."""
    try:
        return await repository.find_by_uuid(uuid)
    except LoginNotFoundError:
        raise _not_found()


@router.post("/uuid/{uuid}", response_model=LoginResponse)
async def update_login(
    uuid: UUID,
    data: LoginUpdate,
    repository: LoginRepository = Depends(get_login_repository),
):
    """
    Rename a login.

    The stored record is read first so created_at and banned are carried over.
    """
    try:
        login = await repository.find_by_uuid(uuid)
        login.login = data.login
        login = await repository.update(login)
    except LoginNotFoundError:
        raise _not_found()
    except LoginConstraintViolationError:
        raise _conflict(data.login)

    logger.info(f"Login updated: {login.login} ({login.uuid})")
    return login


@router.delete("/uuid/{uuid}", response_model=BanResponse)
async def ban_login(
    uuid: UUID,
    repository: LoginRepository = Depends(get_login_repository),
):
    """Ban a login."""
    try:
        banned = await repository.ban_by_uuid(uuid)
    except LoginNotFoundError:
        raise _not_found()

    logger.info(f"Login banned: {uuid}")
    return BanResponse(banned=banned)


@router.get("/login/{login}", response_model=LoginResponse)
async def get_login_by_name(
    login: str,
    repository: LoginRepository = Depends(get_login_repository),
):
    """Get a login by its name."""
    try:
        return await repository.find_by_login(login)
    except LoginNotFoundError:
        raise _not_found()


@router.get("/count", response_class=PlainTextResponse)
async def count_logins(
    repository: LoginRepository = Depends(get_login_repository),
):
    """Total number of logins."""
    return PlainTextResponse(str(await repository.count()))


@router.get("/logins", response_model=LoginPageResponse)
async def list_logins(
    response: Response,
    page: Optional[int] = Query(None, ge=0, le=MAX_PAGE),
    limit: Optional[int] = Query(None, ge=0, le=MAX_LIMIT),
    header_page: Optional[int] = Header(None, alias=PAGE_HEADER, ge=0, le=MAX_PAGE),
    header_limit: Optional[int] = Header(None, alias=LIMIT_HEADER, ge=0, le=MAX_LIMIT),
    repository: LoginRepository = Depends(get_login_repository),
):
    """
    List logins page by page.

    - page: 1-based page number, query parameter or Pagination-Page header
    - limit: page size, query parameter or Pagination-Limit header
    """
    settings = get_settings()

    page = page if page is not None else header_page
    limit = limit if limit is not None else header_limit
    if not page:
        page = 1
    if not limit:
        limit = settings.page_limit_default

    try:
        listing = await listing_service.fetch_listing(
            repository,
            page - 1,
            limit,
            timeout=settings.request_timeout_seconds,
        )
    except asyncio.TimeoutError:
        logger.warning(f"Listing timed out: page={page}, limit={limit}")
        raise HTTPException(
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            detail="Listing timed out",
        )

    response.headers[COUNT_HEADER] = str(listing.total_count)
    response.headers[PAGE_HEADER] = str(page)
    response.headers[LIMIT_HEADER] = str(limit)

    return LoginPageResponse(
        meta=PageMeta(count=listing.total_count, page=page, limit=limit),
        records=[LoginResponse.model_validate(login) for login in listing.records],
    )
