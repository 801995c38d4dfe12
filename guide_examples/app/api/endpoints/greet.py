"""
Greeting endpoint.

``GET /greet/{name}`` resolves a fresh ``GreetingService`` (registered per
call) and returns the greeting for the captured ``name`` as plain text.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from guide_examples.app.api.deps import get_greeting_service
from guide_examples.app.services.greeting_service import GreetingService

router = APIRouter()


@router.get("/{name}", response_class=PlainTextResponse)
async def greet(
    name: str,
    greeting_service: GreetingService = Depends(get_greeting_service),
) -> str:
    return greeting_service.get_greeting(name)
