"""
LoL Item Helper - Backend API
FastAPI application serving cached League of Legends item data
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, HTTPException, BackgroundTasks
from fastapi.middleware.cors import CORSMiddleware

from config import load_settings
from models import ItemStats
from schemas import (
    ItemsResponse, ItemResponse, ThumbnailPathsResponse,
    RefreshResponse, HealthResponse
)
from services.cache import ItemCache
from services.errors import CacheMissError, CacheCorruptError, ItemNotFoundError
from services.item_data import ItemDataService
from services.riot_client import RiotClient

# Configuration
settings = load_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("app")

# Initialize services
riot_client = RiotClient(settings)
item_cache = ItemCache(settings)
item_service = ItemDataService(settings, riot_client, item_cache)

# Outcome of the most recent background refresh, reported by /api/health
refresh_state = {"last_error": None}


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await riot_client.initialize()
    yield
    # Shutdown
    await riot_client.close()

app = FastAPI(
    title="LoL Item Helper API",
    version="1.0.0",
    description="Cached League of Legends item data, filtered by map",
    lifespan=lifespan
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _current_timestamp() -> str:
    return datetime.utcnow().isoformat() + "Z"


async def _refresh_items(map_number: int):
    """Background refresh; no caller is waiting, so failures are recorded for /api/health"""
    try:
        await item_service.request_from_riot(map_number)
        refresh_state["last_error"] = None
    except Exception as e:
        logger.exception("Item data refresh failed")
        refresh_state["last_error"] = f"{_current_timestamp()}: {e}"


@app.get("/")
async def root():
    return {
        "name": "LoL Item Helper API",
        "version": "1.0.0",
        "status": "operational"
    }


@app.post("/api/items/refresh", response_model=RefreshResponse, status_code=202)
async def refresh_items(background_tasks: BackgroundTasks, map_number: int = settings.default_map):
    """
    Re-download item data and thumbnails from Riot

    Runs in the background; poll /api/health for the outcome.
    """
    background_tasks.add_task(_refresh_items, map_number)
    return RefreshResponse(
        status="scheduled",
        map_number=map_number,
        timestamp=_current_timestamp()
    )


@app.get("/api/items", response_model=ItemsResponse)
async def get_items(map_number: int = settings.default_map):
    """Cached items available on a map, minus blacklisted consumables and trinkets"""
    try:
        items = await item_service.get_data(map_number)
    except CacheMissError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CacheCorruptError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return ItemsResponse(map_number=map_number, count=len(items), items=items)


@app.get("/api/items/thumbnails", response_model=ThumbnailPathsResponse)
async def get_thumbnail_paths():
    """Sorted thumbnail paths for every cached item"""
    try:
        paths = await item_service.get_thumbnail_paths()
    except CacheMissError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CacheCorruptError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return ThumbnailPathsResponse(paths=paths)


@app.get("/api/items/{item_id}", response_model=ItemResponse)
async def get_item(item_id: str):
    """Raw item record on Summoner's Rift"""
    try:
        item = await item_service.get_item_data(item_id)
    except CacheMissError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CacheCorruptError as e:
        raise HTTPException(status_code=500, detail=str(e))

    if item is None:
        raise HTTPException(status_code=404, detail=f"Item {item_id} not found")
    return ItemResponse(item_id=item_id, item=item)


@app.get("/api/items/{item_id}/stats", response_model=ItemStats)
async def get_item_stats(item_id: str):
    """Parsed stats for one item, including passive effects"""
    try:
        return await item_service.get_item_stats(item_id)
    except (CacheMissError, ItemNotFoundError) as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CacheCorruptError as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/api/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint"""
    return HealthResponse(
        status="healthy",
        cache_present=item_cache.has_item_data(),
        item_data_path=str(item_cache.data_path),
        thumbnail_dir=str(item_cache.thumbnail_dir),
        last_refresh_error=refresh_state["last_error"]
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
