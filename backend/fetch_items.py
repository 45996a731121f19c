#!/usr/bin/env python3
"""
Download item data and thumbnails from Riot into the local cache

Usage: python fetch_items.py [--map 11]
"""
import argparse
import asyncio
import logging

from config import load_settings, Settings
from services.cache import ItemCache
from services.item_data import ItemDataService
from services.riot_client import RiotClient


async def fetch(settings: Settings, map_number: int):
    client = RiotClient(settings)
    await client.initialize()
    try:
        service = ItemDataService(settings, client, ItemCache(settings))
        await service.request_from_riot(map_number)
    finally:
        await client.close()


def main(argv=None):
    settings = load_settings()

    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--map", type=int, default=settings.default_map, dest="map_number",
                        help="map id used to pick which thumbnails to download (default: %(default)s)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    asyncio.run(fetch(settings, args.map_number))


if __name__ == "__main__":
    main()
