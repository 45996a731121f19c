"""
Item data pipeline
Fetches item data from Riot, caches it on disk and serves filtered views of the local copy
"""

import asyncio
import json
import logging
from typing import Any, Dict, List, Optional

from config import Settings
from models import GameMap, ItemStats
from services.cache import ItemCache
from services.errors import CacheCorruptError, ItemNotFoundError
from services.item_filters import DEFAULT_BLACKLIST, ItemCollection, filter_items
from services.item_stats import parse_item_stats
from services.riot_client import RiotClient

logger = logging.getLogger(__name__)


class ItemDataService:
    """Fetch/cache/filter/parse pipeline for item data"""

    def __init__(
        self,
        settings: Settings,
        client: RiotClient,
        cache: ItemCache,
        blacklist: Optional[List[str]] = None
    ):
        self.settings = settings
        self.client = client
        self.cache = cache
        self.blacklist = list(DEFAULT_BLACKLIST if blacklist is None else blacklist)

    async def request_from_riot(self, map_number: int) -> None:
        """
        Download the full item list, cache it, and save thumbnails for items on the map

        The raw body is written verbatim; a body that isn't valid JSON raises
        before anything is written.
        """
        logger.info("Initializing item data retrieval.")

        raw_body = await self.client.get_item_list()
        body = json.loads(raw_body)
        self.cache.save_item_data(raw_body)

        items = filter_items(map_number, body.get("data", {}), self.blacklist)
        saved = await self.save_images(items)
        logger.info(
            "Item data retrieval finished: %d items on map %s, %d new thumbnails",
            len(items), map_number, len(saved)
        )

    async def save_images(self, items: ItemCollection) -> List[str]:
        """
        Fetch and store a thumbnail for every item, as '{id}.png'

        Each fetch is independent; failures are logged and don't stop the others.

        Returns:
            Names of the thumbnails that were newly written
        """
        image_names = [f"{item['id']}.png" for item in items.values()]
        results = await asyncio.gather(
            *(self._save_image(name) for name in image_names),
            return_exceptions=True
        )

        saved = []
        for name, result in zip(image_names, results):
            if isinstance(result, Exception):
                logger.warning("Failed to save thumbnail %s: %s", name, result)
            elif result:
                saved.append(name)
        return saved

    async def _save_image(self, image_name: str) -> bool:
        image = await self.client.get_thumbnail(image_name)
        return self.cache.save_thumbnail(image_name, image)

    def _load_items(self) -> ItemCollection:
        document = self.cache.load_item_data()
        if not isinstance(document, dict) or not isinstance(document.get("data"), dict):
            raise CacheCorruptError("Cached item JSON has no 'data' object")
        return document["data"]

    async def get_data(self, map_number: int) -> ItemCollection:
        """
        Filtered item collection from the local cache only

        Raises:
            CacheMissError: item data hasn't been fetched yet
            CacheCorruptError: cached file can't be decoded
        """
        logger.debug("Parsing local item data for map %s", map_number)
        return filter_items(map_number, self._load_items(), self.blacklist)

    async def get_item_data(self, item_number) -> Optional[Dict[str, Any]]:
        """Single item record on Summoner's Rift, or None if it's not there"""
        items = await self.get_data(GameMap.SUMMONERS_RIFT.value)
        return items.get(str(item_number))

    async def get_item_stats(self, item_number) -> ItemStats:
        """Parsed stats for one item on Summoner's Rift"""
        item = await self.get_item_data(item_number)
        if item is None:
            raise ItemNotFoundError(item_number)
        return parse_item_stats(item_number, item)

    async def get_thumbnail_paths(self) -> List[str]:
        """Sorted thumbnail paths for every cached item, unfiltered"""
        base = self.settings.thumbnail_web_path
        return sorted(f"{base}{item_key}.png" for item_key in self._load_items())
