"""FastAPI application entry point."""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from logins.config import get_settings
from logins.database import init_db
from logins.api import api_router
from logins.logger import setup_logging, get_logger

settings = get_settings()
logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging(settings.log_level, settings.log_format)
    await init_db()
    logger.info(f"{settings.app_name} started (pagination={settings.pagination_strategy})")
    yield
    # Shutdown
    logger.info(f"{settings.app_name} stopped")


app = FastAPI(
    title=settings.app_name,
    version="1.0.0",
    description="Directory of login identity records",
    lifespan=lifespan,
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "app": settings.app_name}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("logins.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
