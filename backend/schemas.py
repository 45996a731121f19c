"""
Pydantic schemas for API responses
"""

from typing import List, Dict, Any, Optional
from pydantic import BaseModel


class ItemsResponse(BaseModel):
    map_number: int
    count: int
    items: Dict[str, Dict[str, Any]]


class ItemResponse(BaseModel):
    item_id: str
    item: Dict[str, Any]


class ThumbnailPathsResponse(BaseModel):
    paths: List[str]


class RefreshResponse(BaseModel):
    status: str
    map_number: int
    timestamp: str


class HealthResponse(BaseModel):
    status: str
    cache_present: bool
    item_data_path: str
    thumbnail_dir: str
    last_refresh_error: Optional[str] = None
