"""
Root conftest.py for shared test fixtures and configuration.
This file provides common fixtures used across the test suite.
"""

import sys
from pathlib import Path

import pytest
import pytest_asyncio
from loguru import logger

# Add project root to Python path for consistent imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from screenflow import config as sf_config
from screenflow.Animation.tween import Tweener
from screenflow.assets.loader import AssetCatalog
from screenflow.runtime import UiRuntime
from screenflow.Utils.tasks import drain_background_tasks


# ========== Test Environment Isolation ==========

@pytest.fixture(autouse=True)
def isolate_test_environment(monkeypatch, tmp_path):
    """Automatically isolate the test environment from the user's configuration.

    This fixture:
    - Points SCREENFLOW_CONFIG at a file inside the test's tmp_path
    - Drops the cached configuration before and after each test
    """
    config_path = tmp_path / "config" / "config.toml"
    monkeypatch.setenv(sf_config.CONFIG_ENV_VAR, str(config_path))
    sf_config.reset_config_cache()
    yield config_path
    sf_config.reset_config_cache()


# ========== Logging Fixtures ==========

@pytest.fixture
def loguru_messages():
    """Collect every loguru record emitted during the test as 'LEVEL|message' strings."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.rstrip("\n")), level="DEBUG", format="{level}|{message}")
    yield messages
    logger.remove(handler_id)


# ========== Runtime Fixtures ==========

@pytest.fixture
def tweener():
    """A tweener with a short frame interval so transitions settle quickly."""
    return Tweener(frame_interval=0.001)


@pytest.fixture
def catalog():
    return AssetCatalog()


@pytest.fixture
def runtime(catalog):
    return UiRuntime(catalog, current_context="")


@pytest.fixture
def owner(runtime):
    """Context owner registered under 'Main'."""
    return runtime.create_owner("Main")


@pytest_asyncio.fixture
async def drained():
    """Wait for detached transitions started by the test before the loop closes."""
    yield
    await drain_background_tasks(timeout=2.0)


# ========== Test Configuration ==========

def pytest_configure(config):
    """Register custom test markers."""
    config.addinivalue_line("markers", "unit: Unit tests that don't require external resources")
    config.addinivalue_line("markers", "integration: Integration tests exercising several components together")
    config.addinivalue_line("markers", "slow: Tests that take more than 1 second")
