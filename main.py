from contextlib import asynccontextmanager

from fastapi import FastAPI
from shortlink_app.config import settings
from shortlink_app.api.v1 import links, redirect
from shortlink_app.dependencies import get_registry
from shortlink_app.logging_config import setup_logging
from shortlink_app.reaper import ExpiredLinkReaper

logger = setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Start the expired-link reaper with the app and cancel it at shutdown."""
    # Resolve through dependency_overrides so tests sweep the registry they inject
    registry_factory = app.dependency_overrides.get(get_registry, get_registry)
    reaper = ExpiredLinkReaper(
        registry=registry_factory(),
        interval=settings.reaper_interval_seconds
    )
    app.state.reaper = reaper

    logger.info("Starting %s (%s)", settings.app_name, settings.environment)
    reaper.launch()
    try:
        yield
    finally:
        await reaper.shutdown()
        logger.info("Shut down %s", settings.app_name)


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="An expiring short link service built with FastAPI",
    debug=settings.debug,
    lifespan=lifespan
)

@app.get("/")
def read_root():
    """Root endpoint with API information"""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "environment": settings.environment}




######## Include routers
app.include_router(links.router, prefix="/api/v1")
app.include_router(redirect.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=settings.host, port=settings.port)
