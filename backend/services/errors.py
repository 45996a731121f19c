"""
Errors raised by the item data pipeline
"""


class ItemDataError(Exception):
    """Base class for item data failures"""


class CacheMissError(ItemDataError):
    """The local item JSON has not been fetched yet or cannot be read"""


class CacheCorruptError(ItemDataError):
    """The local item JSON exists but is not valid item data"""


class ItemNotFoundError(ItemDataError):
    """The requested item is not in the filtered collection"""

    def __init__(self, item_id):
        self.item_id = item_id
        super().__init__(f"Item {item_id} not found")
