import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from item_service.api.config import Config
from item_service.api.server import create_app, create_greeting_app


@pytest.fixture
def config():
    """Default configuration, isolated from ITEM_SERVICE_* environment variables."""
    return Config(_env_file=None, host="127.0.0.1", port=3000, log_level="INFO")


@pytest.fixture
def app(config):
    return create_app(config)


@pytest.fixture
def client(app):
    """Test client for a freshly seeded item service."""
    return TestClient(app)


@pytest.fixture
def greeting_client(config):
    return TestClient(create_greeting_app(config))
