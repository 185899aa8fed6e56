"""Shared async HTTP plumbing for odds providers (read-only)."""

import asyncio
import json
from typing import Any

import aiohttp
import structlog
from pydantic import ValidationError

from ..core.errors import ApiError
from ..core.models import Match
from ..utils.cache import InMemoryCache, response_cache
from ..config import settings

logger = structlog.get_logger(__name__)


class ProviderClient:
    """
    Base client for a JSON odds provider.

    Holds one aiohttp session per client and caches successful
    GET responses for a short time.
    """

    name = "provider"

    def __init__(
        self,
        base_url: str,
        headers: dict[str, str] | None = None,
        timeout_seconds: float | None = None,
        cache: InMemoryCache = response_cache,
        cache_ttl_seconds: float | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.headers = headers or {}
        self.timeout_seconds = timeout_seconds or settings.request_timeout_seconds
        self.cache = cache
        self.cache_ttl_seconds = cache_ttl_seconds or settings.cache_ttl_seconds
        self._session: aiohttp.ClientSession | None = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                headers=self.headers,
                timeout=aiohttp.ClientTimeout(total=self.timeout_seconds)
            )
        return self._session

    async def close(self):
        """Close the session."""
        if self._session and not self._session.closed:
            await self._session.close()

    def _cache_key(self, endpoint: str, params: dict | None) -> str:
        return f"{self.name}:{endpoint}:{json.dumps(params or {}, sort_keys=True, default=str)}"

    async def _request(
        self,
        endpoint: str,
        params: dict | None = None,
        body: dict | None = None
    ) -> Any:
        """
        Fetch a JSON document, served from cache when fresh.

        Sends a POST with a JSON body when `body` is given, else a GET.

        Raises:
            ApiError: non-200 status, non-JSON body, timeout or transport failure
        """
        cache_key = self._cache_key(endpoint, {"params": params, "body": body})
        cached = self.cache.get(cache_key, max_age_seconds=self.cache_ttl_seconds)
        if cached is not None:
            return cached

        session = await self._get_session()
        url = f"{self.base_url}{endpoint}"
        method = "POST" if body is not None else "GET"

        try:
            async with session.request(method, url, params=params, json=body) as resp:
                if resp.status != 200:
                    detail = await resp.text()
                    logger.warning(
                        "provider_http_error",
                        provider=self.name,
                        endpoint=endpoint,
                        status=resp.status,
                    )
                    raise ApiError.from_status(resp.status, detail[:200] or None)
                try:
                    data = await resp.json(content_type=None)
                except ValueError as e:
                    logger.warning("provider_bad_payload", provider=self.name, endpoint=endpoint)
                    raise ApiError("Invalid response format from API", 502) from e
        except asyncio.TimeoutError:
            raise ApiError(f"API Error: {self.name} request timed out", 504) from None
        except aiohttp.ClientError as e:
            raise ApiError(f"API Error: {e}") from e

        self.cache.set(cache_key, data)
        return data


class LiveOddsClient(ProviderClient):
    """
    Best-effort client for in-play odds.

    A failing live provider must not take down the live feed, so
    provider errors are logged and produce an empty list.
    """

    async def get_live_events(self) -> list[dict]:
        """Fetch raw in-play events from the provider."""
        raise NotImplementedError

    def _parse_event(self, raw: dict) -> Match:
        """Normalize one raw event into a Match."""
        raise NotImplementedError

    async def fetch_live_matches(self) -> list[Match]:
        """Fetch and normalize live matches. Never raises ApiError."""
        try:
            raw_events = await self.get_live_events()
        except ApiError as e:
            logger.warning("live_provider_failed", provider=self.name, error=e.message)
            return []

        matches = []
        for raw in raw_events:
            try:
                matches.append(self._parse_event(raw))
            except (KeyError, TypeError, AttributeError, IndexError, ValueError, ValidationError) as e:
                logger.debug("live_event_skipped", provider=self.name, error=str(e))

        logger.info("live_matches_fetched", provider=self.name, count=len(matches))
        return matches
