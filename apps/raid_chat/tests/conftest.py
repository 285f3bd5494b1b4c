"""Pytest Configuration for raid_chat tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add apps directory to path for imports
apps_dir = Path(__file__).parent.parent.parent
if str(apps_dir) not in sys.path:
    sys.path.insert(0, str(apps_dir))


@pytest.fixture
def anyio_backend():
    """Use asyncio for async tests."""
    return "asyncio"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are re-read from the environment for every test."""
    from raid_chat.setup.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
