"""
Item collection filters
Both filters build a new collection and leave their input untouched
"""

from typing import Any, Dict, Iterable

ItemCollection = Dict[str, Dict[str, Any]]

# Consumables, trinkets and enchantments that don't matter for builds
DEFAULT_BLACKLIST = [
    'Furor',
    'Alacrity',
    'Captain',
    'Homeguard',
    'Distortion',
    'Totem',
    'Lens',
    'Scrying Orb',
    'Farsight Orb',
    'Ward',
    'Biscuit',
    'Potion',
]


def filter_items_by_map(map_number: int, items: ItemCollection) -> ItemCollection:
    """Keep only items available on the given map"""
    return {
        item_id: item
        for item_id, item in items.items()
        if _on_map(item, map_number)
    }


def _on_map(item: Dict[str, Any], map_number: int) -> bool:
    # JSON object keys are strings; accept int keys for data built in code
    maps = item.get('maps') or {}
    return bool(maps.get(str(map_number)) or maps.get(map_number))


def filter_items_by_name(blacklist: Iterable[str], items: ItemCollection) -> ItemCollection:
    """Drop items whose name contains any blacklisted substring (case-sensitive)"""
    blacklist = list(blacklist)
    return {
        item_id: item
        for item_id, item in items.items()
        if not any(entry in item.get('name', '') for entry in blacklist)
    }


def filter_items(
    map_number: int,
    items: ItemCollection,
    blacklist: Iterable[str] = DEFAULT_BLACKLIST
) -> ItemCollection:
    """Map filter followed by the name blacklist"""
    return filter_items_by_name(blacklist, filter_items_by_map(map_number, items))
