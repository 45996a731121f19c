"""
Riot static-data API client
Handles the HTTP side of item retrieval: the item list JSON and per-item thumbnails
"""

import logging
import httpx
from typing import Optional

from config import Settings

logger = logging.getLogger(__name__)


class RiotClient:
    """Client for the Riot item endpoint and the Data Dragon image CDN"""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self.transport = transport
        self.client = None

    async def initialize(self):
        """Initialize the HTTP client"""
        self.client = httpx.AsyncClient(
            timeout=self.settings.request_timeout,
            limits=httpx.Limits(max_keepalive_connections=10, max_connections=20),
            transport=self.transport,
        )

    async def close(self):
        """Close the HTTP client"""
        if self.client:
            await self.client.aclose()
            self.client = None

    async def _make_request(self, url: str, params: Optional[dict] = None) -> httpx.Response:
        """Single GET, no retries"""
        if self.client is None:
            raise RuntimeError("RiotClient.initialize() must be awaited before making requests")

        response = await self.client.get(url, params=params)
        response.raise_for_status()
        return response

    async def get_item_list(self) -> str:
        """
        Fetch the full item list with all data fields

        Returns:
            The raw response body, undecoded, so it can be cached verbatim
        """
        params = {
            "itemListData": "all",
            "api_key": self.settings.api_key,
        }
        response = await self._make_request(self.settings.item_url, params)
        logger.debug("Fetched item list (%d bytes)", len(response.content))
        return response.text

    async def get_thumbnail(self, image_name: str) -> bytes:
        """Fetch a single item thumbnail, e.g. '3031.png'"""
        url = f"{self.settings.thumbnail_url.rstrip('/')}/{image_name}"
        response = await self._make_request(url)
        return response.content
