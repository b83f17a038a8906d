"""API routes."""
from fastapi import APIRouter
from logins.api import logins

api_router = APIRouter()

api_router.include_router(logins.router, prefix="/v1", tags=["Logins"])
