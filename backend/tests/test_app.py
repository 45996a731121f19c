"""
Tests for the HTTP API
Run with: pytest tests/test_app.py -v
"""

import json
import pytest
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

import app as app_module
from config import Settings
from services.cache import ItemCache
from services.item_data import ItemDataService
from services.riot_client import RiotClient

ITEM_DATA = {
    "data": {
        "1001": {"id": 1001, "name": "Boots of Speed", "maps": {"11": True}, "stats": {}},
        "2003": {"id": 2003, "name": "Health Potion", "maps": {"11": True}, "stats": {}},
        "3071": {"id": 3071, "name": "Black Cleaver", "maps": {"11": True},
                 "stats": {"FlatPhysicalDamageMod": 50.0, "FlatHPPoolMod": 400.0},
                 "effect": {"Effect1Amount": 5}},
        "3090": {"id": 3090, "name": "Wooglet's Witchcap", "maps": {"10": True}, "stats": {}},
    }
}


class TestItemsAPI:

    @pytest.fixture
    def settings(self, tmp_path):
        return Settings(json_dir=tmp_path / "json", thumbnail_dir=tmp_path / "images")

    @pytest.fixture
    def client(self, settings, monkeypatch):
        cache = ItemCache(settings)
        service = ItemDataService(settings, RiotClient(settings), cache)
        monkeypatch.setattr(app_module, "item_cache", cache)
        monkeypatch.setattr(app_module, "item_service", service)
        monkeypatch.setitem(app_module.refresh_state, "last_error", None)
        return TestClient(app_module.app)

    @pytest.fixture
    def cached(self, settings):
        settings.json_dir.mkdir(parents=True)
        settings.item_data_path.write_text(json.dumps(ITEM_DATA), encoding="utf-8")

    def test_root(self, client):
        assert client.get("/").json()["status"] == "operational"

    def test_items_without_cache(self, client):
        response = client.get("/api/items")
        assert response.status_code == 404

    def test_items_filtered(self, client, cached):
        response = client.get("/api/items", params={"map_number": 11})
        assert response.status_code == 200

        body = response.json()
        assert body["map_number"] == 11
        assert body["count"] == 2
        assert set(body["items"]) == {"1001", "3071"}

    def test_items_corrupt_cache(self, client, settings):
        settings.json_dir.mkdir(parents=True)
        settings.item_data_path.write_text("not json", encoding="utf-8")
        assert client.get("/api/items").status_code == 500

    def test_single_item(self, client, cached):
        response = client.get("/api/items/1001")
        assert response.status_code == 200
        assert response.json()["item"]["name"] == "Boots of Speed"

    def test_single_item_missing(self, client, cached):
        assert client.get("/api/items/2003").status_code == 404

    def test_item_stats(self, client, cached):
        response = client.get("/api/items/3071/stats")
        assert response.status_code == 200

        stats = response.json()
        assert stats["name"] == "Black Cleaver"
        assert stats["armorpen"] == 0.3
        assert stats["attack_damage"] == 50.0
        assert stats["health"] == 400.0

    def test_item_stats_missing(self, client, cached):
        assert client.get("/api/items/9999/stats").status_code == 404

    def test_thumbnail_paths(self, client, cached):
        response = client.get("/api/items/thumbnails")
        assert response.status_code == 200
        assert response.json()["paths"] == [
            "/images/items/1001.png",
            "/images/items/2003.png",
            "/images/items/3071.png",
            "/images/items/3090.png",
        ]

    def test_refresh_scheduled(self, client, monkeypatch):
        calls = []

        async def fake_request(map_number):
            calls.append(map_number)

        monkeypatch.setattr(app_module.item_service, "request_from_riot", fake_request)
        response = client.post("/api/items/refresh", params={"map_number": 12})

        assert response.status_code == 202
        assert response.json()["status"] == "scheduled"
        assert calls == [12]

    def test_refresh_failure_reported_in_health(self, client):
        """The client was never initialized, so the background refresh fails"""
        client.post("/api/items/refresh")

        health = client.get("/api/health").json()
        assert health["status"] == "healthy"
        assert health["cache_present"] is False
        assert "initialize" in health["last_refresh_error"]

    def test_health_cache_present(self, client, cached):
        assert client.get("/api/health").json()["cache_present"] is True

if __name__ == "__main__":
    pytest.main([__file__, "-v"])
