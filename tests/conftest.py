"""
Shared test fixtures for the option store test suite.
"""

# noqa: E402 (Standard for test configuration)
from datetime import datetime, timezone

import pytest

import test_env_setup  # noqa: F401
from app.models import Option

# ============================================================================
# Model Fixtures
# ============================================================================


@pytest.fixture
def created_at() -> datetime:
    return datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


@pytest.fixture
def sample_option(created_at: datetime) -> Option:
    """A fully populated, persisted option."""
    return Option(
        id=7,
        uuid="5f1c9a52-7b8e-4f3a-9c61-2d0e8a4b6f11",
        key="agent_heartbeat_interval",
        value="30",
        created_at=created_at,
        updated_at=datetime(2024, 3, 4, 5, 6, 7, tzinfo=timezone.utc),
    )


@pytest.fixture
def other_option(created_at: datetime) -> Option:
    return Option(
        id=8,
        uuid="0b8d3e0c-22a4-4d4e-8a0e-6a7f1f9c2c3d",
        key="maintenance_mode",
        value="false",
        created_at=created_at,
        updated_at=created_at,
    )


# ============================================================================
# Codec Fixtures
# ============================================================================


class FakeCodec:
    """Codec double that records calls and returns canned results."""

    def __init__(self, encoded: str = '{"fake": true}', decoded=None):
        self.encoded = encoded
        self.decoded = decoded
        self.encode_calls = []
        self.decode_calls = []

    def encode(self, obj):
        self.encode_calls.append(obj)
        return self.encoded

    def decode(self, model_cls, data):
        self.decode_calls.append((model_cls, data))
        return self.decoded


@pytest.fixture
def fake_codec() -> FakeCodec:
    return FakeCodec()
