"""
Notes API — Application Wiring Tests
======================================

What:  Tests for configuration, the health route, static assets, and
       per-app store isolation.
"""

import time

import pytest
from httpx import ASGITransport, AsyncClient
from pydantic import ValidationError as SettingsValidationError

from notes_api import __version__
from notes_api.config import DEFAULT_PUBLIC_DIR, Settings
from notes_api.main import create_app
from notes_api.services.note_store import NoteStore


def client_for(app):
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


class TestSettings:

    def test_port_defaults_to_3000(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        assert Settings().port == 3000

    def test_port_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        assert Settings().port == 8080

    def test_empty_port_falls_back_to_3000(self, monkeypatch):
        monkeypatch.setenv("PORT", "")
        assert Settings().port == 3000

    def test_invalid_port_rejected(self, monkeypatch):
        monkeypatch.setenv("PORT", "70000")
        with pytest.raises(SettingsValidationError):
            Settings()

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert Settings().log_level == "DEBUG"

    def test_invalid_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        with pytest.raises(SettingsValidationError):
            Settings()

    def test_cors_origins_list(self):
        settings = Settings(cors_origins="http://a.test, http://b.test,")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_public_dir_defaults_to_bundled_assets(self):
        assert Settings().public_dir == DEFAULT_PUBLIC_DIR
        assert (DEFAULT_PUBLIC_DIR / "index.html").is_file()


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_reports_note_count(self, test_client):
        await test_client.post("/api/notes", json={"text": "buy milk"})
        response = await test_client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == __version__
        assert body["notes"] == 2
        assert body["uptime_seconds"] >= 0

    @pytest.mark.asyncio
    async def test_uptime_measured_from_app_start(self, app, test_client):
        app.state.started_at = time.time() - 100
        response = await test_client.get("/health")
        assert 100 <= response.json()["uptime_seconds"] < 200

    @pytest.mark.asyncio
    async def test_new_app_starts_with_fresh_uptime(self):
        app = create_app(store=NoteStore())
        async with client_for(app) as client:
            response = await client.get("/health")
        assert response.json()["uptime_seconds"] < 60


class TestStaticAssets:

    @pytest.mark.asyncio
    async def test_index_served_at_root(self, test_client):
        response = await test_client.get("/")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "/app.js" in response.text

    @pytest.mark.asyncio
    async def test_asset_content_type_inferred(self, test_client):
        response = await test_client.get("/style.css")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/css")

    @pytest.mark.asyncio
    async def test_missing_asset_is_404(self, test_client):
        response = await test_client.get("/does-not-exist.txt")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_custom_public_dir(self, tmp_path):
        (tmp_path / "hello.txt").write_text("hi there")
        app = create_app(settings=Settings(public_dir=tmp_path), store=NoteStore())
        async with client_for(app) as client:
            response = await client.get("/hello.txt")
        assert response.status_code == 200
        assert response.text == "hi there"

    @pytest.mark.asyncio
    async def test_missing_public_dir_disables_static(self, tmp_path):
        app = create_app(settings=Settings(public_dir=tmp_path / "absent"), store=NoteStore())
        async with client_for(app) as client:
            static = await client.get("/index.html")
            api = await client.get("/api/notes")
        assert static.status_code == 404
        assert api.status_code == 200
        assert api.json() == []


class TestStoreIsolation:

    @pytest.mark.asyncio
    async def test_apps_do_not_share_notes(self):
        first, second = create_app(), create_app()
        async with client_for(first) as client:
            await client.post("/api/notes", json={"text": "only in first"})
        async with client_for(second) as client:
            response = await client.get("/api/notes")
        assert response.json() == [{"id": 1, "text": "Welcome to Codespace demo!"}]

    @pytest.mark.asyncio
    async def test_app_uses_injected_store(self):
        store = NoteStore()
        app = create_app(store=store)
        async with client_for(app) as client:
            await client.post("/api/notes", json={"text": "injected"})
        assert [n.text for n in store.list()] == ["injected"]
