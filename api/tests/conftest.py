"""
Pytest configuration for API tests

Fixtures and configuration for FastAPI endpoint testing. Each test gets a
fresh in-memory collection driven by a manual clock.
"""

import os

import pytest

from api.tests.factories import CardanoAddressFactory, GemstoneFactory


# Settings are read at import time, so the environment must be ready first
os.environ.setdefault("API_KEY", "test_api_key")
os.environ.setdefault("NETWORK", "testnet")
os.environ.setdefault("ADMIN_ADDRESS", CardanoAddressFactory.create_testnet_address())

from fastapi.testclient import TestClient

from api.config import settings
from api.enums import CallerRole
from api.main import app
from api.services.collection_service import CollectionService, get_collection_service
from api.services.token_service import TokenService
from api.utils.addresses import normalize_address
from goblet_contracts.clock import ManualClock
from goblet_contracts.types import GemType


@pytest.fixture
def clock():
    """Clock starting at 2022-01-01T00:00:00Z"""
    return ManualClock()


@pytest.fixture
def admin_address():
    return normalize_address(settings.admin_address, settings.network)


@pytest.fixture
def service(clock, admin_address):
    """Fresh collection service per test"""
    return CollectionService(
        admin_address,
        clock=clock,
        gemstone_cid="QmGemstones",
        gemstone_redeemed_cid="QmRedeemedGemstones",
    )


@pytest.fixture
def client(service):
    """Create FastAPI test client bound to the per-test collection service"""
    app.dependency_overrides[get_collection_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# Auth fixtures
@pytest.fixture
def api_key():
    """Get operator API key from settings"""
    return settings.api_key


@pytest.fixture
def api_key_headers(api_key):
    return {"X-API-Key": api_key}


def bearer_headers(address: str, role: CallerRole = CallerRole.HOLDER) -> dict:
    token, _, _ = TokenService.create_session_token(address, role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(admin_address):
    return bearer_headers(admin_address, CallerRole.ADMIN)


# Wallet fixtures
@pytest.fixture
def alice():
    return CardanoAddressFactory.create_testnet_address()


@pytest.fixture
def bob():
    return CardanoAddressFactory.create_testnet_address()


@pytest.fixture
def alice_headers(alice):
    return bearer_headers(alice)


@pytest.fixture
def bob_headers(bob):
    return bearer_headers(bob)


@pytest.fixture
def session_headers():
    """Factory fixture: Bearer headers for any address"""
    return bearer_headers


@pytest.fixture
def collect_set(client, admin_headers):
    """Factory fixture: whitelist and mint one gemstone of every type for a wallet"""

    def _collect(address: str, headers: dict) -> list[int]:
        token_ids = []
        for gem in GemType:
            response = client.post(
                "/api/v1/gemstones/whitelist",
                json=GemstoneFactory.whitelist_request(address, gem),
                headers=admin_headers,
            )
            assert response.status_code == 200, response.text
            response = client.post(
                "/api/v1/gemstones/mint", json=GemstoneFactory.mint_request(gem), headers=headers
            )
            assert response.status_code == 200, response.text
            token_ids.append(response.json()["token_id"])
        return token_ids

    return _collect
