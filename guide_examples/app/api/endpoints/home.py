"""Root endpoint reporting that the application is up."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from guide_examples.app.api.deps import get_settings
from guide_examples.app.core.config import Settings

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def index(settings: Settings = Depends(get_settings)) -> str:
    """Return the configured welcome message."""
    return settings.welcome_message
