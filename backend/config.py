"""
Configuration for the LoL Item Helper
Values come from the environment (or a .env file) and are passed explicitly to services
"""

import os
from pathlib import Path
from dotenv import load_dotenv
from pydantic import BaseModel, Field

ITEM_DATA_FILENAME = "itemData.json"


class Settings(BaseModel):
    """Riot API endpoints, credentials and local cache locations"""
    api_key: str = ""
    item_url: str = "https://global.api.pvp.net/api/lol/static-data/na/v1.2/item"
    thumbnail_url: str = "http://ddragon.leagueoflegends.com/cdn/5.2.1/img/item"
    json_dir: Path = Path("./data/json")
    thumbnail_dir: Path = Path("./data/images/items")
    thumbnail_web_path: str = "/images/items/"
    request_timeout: float = Field(default=30.0, gt=0)
    default_map: int = 11
    log_level: str = "INFO"

    @property
    def item_data_path(self) -> Path:
        return self.json_dir / ITEM_DATA_FILENAME


def load_settings() -> Settings:
    """Build Settings from environment variables, reading .env first"""
    load_dotenv()

    # Only pass what is set so the model defaults apply otherwise
    env_map = {
        "api_key": "RIOT_API_KEY",
        "item_url": "RIOT_ITEM_URL",
        "thumbnail_url": "RIOT_THUMBNAIL_URL",
        "json_dir": "ITEM_JSON_DIR",
        "thumbnail_dir": "ITEM_THUMBNAIL_DIR",
        "thumbnail_web_path": "ITEM_THUMBNAIL_WEB_PATH",
        "request_timeout": "REQUEST_TIMEOUT_SECONDS",
        "default_map": "DEFAULT_MAP",
        "log_level": "LOG_LEVEL",
    }
    values = {
        field: os.getenv(env_var)
        for field, env_var in env_map.items()
        if os.getenv(env_var) is not None
    }
    return Settings(**values)
