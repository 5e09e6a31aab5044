"""
Singleton provider-registry client with rate limiting using aiolimiter.
"""
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from aiohttp import ClientSession, ClientTimeout
from aiolimiter import AsyncLimiter
from loguru import logger

from geomatch.config import CONCURRENCY, REGISTRY_API_TOKEN, REGISTRY_BASE_URL, REQUEST_TIMEOUT

Params = Union[Dict[str, Any], Sequence[Tuple[str, str]]]


class RegistryClient:
    """
    Singleton HTTP client for the Caschi Gialli provider registry.
    Uses AsyncLimiter for rate limiting instead of semaphores.
    """
    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not RegistryClient._initialized:
            self.base_url = REGISTRY_BASE_URL.rstrip("/")
            self.api_token = REGISTRY_API_TOKEN
            # Token bucket: CONCURRENCY requests per second
            self.rate_limiter = AsyncLimiter(max_rate=CONCURRENCY, time_period=1.0)
            self._session: Optional[ClientSession] = None
            RegistryClient._initialized = True

    async def _get_session(self) -> ClientSession:
        """Get or create the aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = ClientSession(timeout=ClientTimeout(total=REQUEST_TIMEOUT))
        return self._session

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_token:
            headers["Authorization"] = f"Bearer {self.api_token}"
        return headers

    async def get_json(self, path: str, params: Optional[Params] = None) -> Union[Dict[str, Any], List[Any]]:
        """
        Send a GET request to the registry and return the decoded JSON body.

        Args:
            path: Endpoint path, e.g. "/cg/inRange".
            params: Query parameters. Pass a list of pairs to repeat a key.

        Returns:
            Parsed JSON response body.
        """
        async with self.rate_limiter:
            session = await self._get_session()
            url = f"{self.base_url}{path}"
            try:
                async with session.get(url, params=params, headers=self._headers()) as resp:
                    resp.raise_for_status()
                    data = await resp.json()
                    logger.debug(f"Registry GET {path} -> {resp.status}")
                    return data
            except Exception as e:
                logger.debug(f"⚠️ Registry GET {path} failed: {e}")
                raise

    async def close(self):
        """Close the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None
