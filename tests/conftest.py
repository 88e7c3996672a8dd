"""Global pytest fixtures and configuration."""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from advisor.models.device import DeviceSnapshot, TransferJob  # noqa: E402
from advisor.services.releases import ReleaseStore  # noqa: E402


@pytest.fixture(autouse=True)
def reset_release_store():
    """Reset the ReleaseStore singleton around every test."""
    ReleaseStore._instance = None
    yield
    ReleaseStore._instance = None


@pytest.fixture
def make_device():
    """Factory for DeviceSnapshot with sensible online defaults."""
    def _make(**overrides):
        data = {
            "installed_version": "15.0.0",
            "target": "rpi3",
            "online": True,
            "os_update_version": None,
            "min_os_feature_data": {"api_ota_releases": "14.0.0"},
            "jobs": {},
        }
        data.update(overrides)
        return DeviceSnapshot(**data)
    return _make


@pytest.fixture
def working_job():
    """An OS download in progress (percent unit)."""
    return TransferJob(status="working", unit="percent", value=42.6)


@pytest.fixture
def make_mock_client():
    """Factory for an AsyncMock standing in for httpx.AsyncClient."""
    return _make_mock_client


@pytest.fixture
def make_json_response():
    """Factory for a MagicMock httpx response with a JSON body."""
    return _make_json_response


def _make_mock_client(response=None, side_effect=None):
    mock_client = AsyncMock()
    if side_effect is not None:
        mock_client.get = AsyncMock(side_effect=side_effect)
    else:
        mock_client.get = AsyncMock(return_value=response)
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    return mock_client


def _make_json_response(body, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.raise_for_status = MagicMock()
    response.json = MagicMock(return_value=body)
    return response
