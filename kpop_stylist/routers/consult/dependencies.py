"""FastAPI dependencies shared across consultation endpoints."""

from typing import AsyncIterator

import httpx
from fastapi import Request

from kpop_stylist.config import Settings


def get_settings(request: Request) -> Settings:
    """Return the settings the application was created with."""
    return request.app.state.settings


async def get_http_client(request: Request) -> AsyncIterator[httpx.AsyncClient]:
    """Open an upstream HTTP client for the duration of one request."""
    settings: Settings = request.app.state.settings
    async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
        yield client
