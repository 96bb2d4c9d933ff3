"""FastAPI application entry point."""

from fastapi import FastAPI

from accounts import __version__
from accounts.api import auth, users
from accounts.api.errors import register_error_handlers
from accounts.config import get_settings

settings = get_settings()

app = FastAPI(
    title="Accounts API",
    description="User accounts with access/refresh token sessions",
    version=__version__,
)

register_error_handlers(app)

# Register routers
app.include_router(auth.router)
app.include_router(users.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
