from typing import AsyncIterator

import httpx

from hours_filler.core.config import settings


# FastAPI dependency: one Factorial client per request
async def get_factorial_client() -> AsyncIterator[httpx.AsyncClient]:
    """
    Opens an httpx client against the Factorial API, yields it, and closes it after the response.
    The session cookie is not set here. Each call forwards it as-is.
    """
    async with httpx.AsyncClient(
        base_url=settings.FACTORIAL_API_URL,
        timeout=settings.FACTORIAL_TIMEOUT,
    ) as client:
        yield client
