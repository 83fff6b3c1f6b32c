"""
pytest configuration for Web Dev Tools.
Puts src/ on the import path, registers markers and provides a Flask test client.
"""

import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent / "src"))


def pytest_configure(config):
    """Configure pytest markers and test environment."""
    os.environ.setdefault('WEBDEV_TOOLS_CONFIG_FILE', str(Path(__file__).parent / "config" / "config.json"))

    config.addinivalue_line(
        "markers", "api: marks tests that exercise HTTP endpoints through the Flask test client"
    )
    config.addinivalue_line(
        "markers", "slow: marks tests that render images or other large payloads"
    )


@pytest.fixture
def client():
    """Flask test client for endpoint tests."""
    from main import app
    app.config['TESTING'] = True
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def reset_state():
    """Start every test with empty history and favorites."""
    from api.history import favorites_manager, history_manager
    history_manager.history_data.clear()
    history_manager.global_history.clear()
    favorites_manager.clear()
    yield
