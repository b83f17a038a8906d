"""Pydantic schemas for request/response models."""
from logins.schemas.login import (
    LoginCreate,
    LoginUpdate,
    LoginResponse,
    BanResponse,
    PageMeta,
    LoginPageResponse,
)

__all__ = [
    "LoginCreate",
    "LoginUpdate",
    "LoginResponse",
    "BanResponse",
    "PageMeta",
    "LoginPageResponse",
]
