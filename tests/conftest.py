"""
Pytest configuration and fixtures for testing.

Provides fixtures for:
- An empty store and an application built around it
- Sync and async test clients
- Test data creation (players, teams)
"""

import os
from datetime import date
from typing import Dict

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

# Set test environment variables before importing app
os.environ["SEED_ON_STARTUP"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

from club_api.app import create_app
from club_api.config import Settings
from club_api.store import ClubStore


@pytest.fixture
def store() -> ClubStore:
    """Empty store shared by the app and the test."""
    return ClubStore()


@pytest.fixture
def app(store):
    return create_app(Settings(seed_on_startup=False), store=store)


@pytest.fixture
def client(app):
    """Create a test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def async_client(app):
    """Create an async test client for the FastAPI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test", follow_redirects=True) as ac:
        yield ac


@pytest.fixture
def player_payload() -> Dict:
    return {
        "name": "John Doe",
        "birthDate": "1990-01-01",
        "height": 180,
        "weight": 80,
        "placeOfBirth": "New York"
    }


@pytest.fixture
def team_payload() -> Dict:
    return {
        "name": "Harbour Gulls",
        "ground": "Stadium 1",
        "coach": "Coach Smith",
        "foundedYear": 1921,
        "region": "North"
    }


@pytest.fixture
def test_team(store):
    """A team with no players, created directly in the store."""
    return store.add_team(
        name="Test Team",
        ground="Test Ground",
        coach="Test Coach",
        founded_year=1950,
        region="Test Region"
    ).team


@pytest.fixture
def test_player(store):
    """An unsigned player created directly in the store."""
    return store.add_player(
        name="Test Player",
        birth_date=date(1995, 6, 15),
        height=185,
        weight=90,
        place_of_birth="Test City"
    )
