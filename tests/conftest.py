# tests/conftest.py - shared fixtures
#
# Every fixture builds its own repository/application, so tests never
# share items with each other or with the module-level ``app``.

import os

os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from items_api.app.core.config import Settings
from items_api.app.main import create_app
from items_api.app.repositories.memory import SEED_ITEMS, InMemoryItemRepository

ITEMS_URL = "/api/v1/items/"

BRONZE_SWORD_ID = "615a0e18-415c-41ba-9c51-3b403deec651"
TRIDENT_ID = "bebaf5f9-2cbe-4c84-a472-4bd11dadec79"
POTION_ID = "eb425a54-9966-4b70-a64b-8020e3ce5995"


@pytest.fixture
def repository():
    """A store holding the three sample items."""
    return InMemoryItemRepository(seed=SEED_ITEMS)


@pytest.fixture
def empty_repository():
    return InMemoryItemRepository()


@pytest.fixture
def settings():
    return Settings(log_level="WARNING", seed_sample_items=True, empty_list_is_error=True)


@pytest.fixture
def client(settings):
    return TestClient(create_app(settings))
