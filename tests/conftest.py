import httpx
import pytest
from asgi_lifespan import LifespanManager

from app.core.config import settings
from app.main import app
from app.services import llm as llm_service

API_BASE = "http://test"


@pytest.fixture(autouse=True)
def isolate_settings(monkeypatch):
    """Tests never reach Redis, OpenAI or Open-Meteo unless they opt in."""
    monkeypatch.setattr(settings, "LLM_ENABLED", False)
    monkeypatch.setattr(settings, "WEATHER_ENABLED", False)
    llm_service.set_provider(None)
    yield
    llm_service.set_provider(None)


@pytest.fixture
def memory_cache(monkeypatch):
    store = {}

    async def _get(key):
        return store.get(key)

    async def _set(key, data, ttl):
        store[key] = data

    monkeypatch.setattr(llm_service, "cache_json_get", _get)
    monkeypatch.setattr(llm_service, "cache_json_set", _set)
    return store


@pytest.fixture
async def client():
    async with LifespanManager(app):
        async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url=API_BASE) as ac:
            yield ac
