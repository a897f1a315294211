import shutil

import pytest
from fastapi.testclient import TestClient

from app import create_app
from constants import BASE_DIR
from store import MockDatabase

MOCK_DATA_DIR = BASE_DIR / "mock_data"


@pytest.fixture
def data_dir(tmp_path):
    """A private copy of the mock data so tests can write freely."""
    target = tmp_path / "mock_data"
    shutil.copytree(MOCK_DATA_DIR, target)
    return target


@pytest.fixture
def db(data_dir):
    return MockDatabase(data_dir)


@pytest.fixture
def playground_app(data_dir):
    return create_app(data_dir=str(data_dir), scheduler_enabled=False, relay_backend="memory")


@pytest.fixture
def client(playground_app):
    return TestClient(playground_app)
