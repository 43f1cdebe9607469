"""Async Unsplash API client for the image search endpoint.

Wraps ``GET /search/photos`` and reshapes its results into the fields the
API returns to clients.
"""
import asyncio
import logging
import time
from typing import Any, Callable, Dict, List, Optional

import aiohttp

from app.config import settings

logger = logging.getLogger(__name__)


class UnsplashAPIError(Exception):
    """Rich error from Unsplash API calls: carries status, message, and URL."""

    def __init__(self, status: int, message: str, url: str):
        self.status = status
        self.message = message
        self.url = url
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.status:
            return f"HTTP {self.status} from {self.url}: {self.message}"
        return f"Connection error for {self.url}: {self.message}"


class UnsplashClient:
    """Async HTTP client for the Unsplash search API.

    Supports async context manager for connection pooling across multiple
    calls. Falls back to a per-call session if used without ``async with``.
    """

    def __init__(self, access_key: str, base_url: str, timeout: float = 30):
        if not access_key:
            raise ValueError("UNSPLASH_ACCESS_KEY not set. Cannot search images.")
        self.access_key = access_key
        self.base_url = base_url.rstrip("/")
        self._session: Optional[aiohttp.ClientSession] = None
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    async def open(self) -> None:
        """Open a persistent session for connection pooling."""
        if not self._session:
            self._session = aiohttp.ClientSession()

    async def close(self) -> None:
        """Close the persistent session."""
        if self._session:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "UnsplashClient":
        await self.open()
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()

    async def search_photos(self, query: str) -> List[Dict[str, Any]]:
        """Return the raw ``results`` array for a free-text query."""
        url = f"{self.base_url}/search/photos"
        headers = {
            "Authorization": f"Client-ID {self.access_key}",
            "Accept-Version": "v1",
        }
        start = time.monotonic()

        if self._session:
            data = await self._get_json(self._session, url, {"query": query}, headers, self._timeout)
        else:
            async with aiohttp.ClientSession() as session:
                data = await self._get_json(session, url, {"query": query}, headers, self._timeout)

        results = (data or {}).get("results") or []
        logger.info(
            "Unsplash search %r returned %d result(s) in %.0f ms",
            query, len(results), (time.monotonic() - start) * 1000,
        )
        return results

    @staticmethod
    async def _get_json(
        session: aiohttp.ClientSession, url: str,
        params: dict, headers: dict,
        timeout: aiohttp.ClientTimeout,
    ) -> Optional[Dict[str, Any]]:
        """Execute a single GET request and decode its JSON body."""
        try:
            async with session.get(url, params=params, headers=headers, timeout=timeout) as resp:
                if resp.status >= 400:
                    body = await resp.text()
                    raise UnsplashAPIError(
                        status=resp.status,
                        message=body[:500] or resp.reason or "No response body",
                        url=url,
                    )
                return await resp.json()
        except UnsplashAPIError:
            raise
        except asyncio.TimeoutError as e:
            raise UnsplashAPIError(
                status=0,
                message="Request timed out, Unsplash API did not respond in time",
                url=url,
            ) from e
        except aiohttp.ClientError as e:
            raise UnsplashAPIError(
                status=0,
                message=str(e) or type(e).__name__,
                url=url,
            ) from e


def to_image_result(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Reshape one Unsplash result into the fields returned to clients."""
    return {
        "image_url": raw.get("urls"),
        "description": raw.get("description"),
        "alt_description": raw.get("alt_description"),
    }


def build_unsplash_client() -> UnsplashClient:
    """Create a client from the current settings; raises if the key is missing."""
    return UnsplashClient(
        access_key=settings.UNSPLASH_ACCESS_KEY,
        base_url=settings.UNSPLASH_API_URL,
        timeout=settings.UNSPLASH_TIMEOUT,
    )


def get_unsplash_client() -> Callable[[], UnsplashClient]:
    """FastAPI dependency returning a client factory.

    The client is built by the route after the request is validated, so a
    missing access key surfaces as that route's own error.
    """
    return build_unsplash_client
