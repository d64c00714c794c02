# flake8: noqa
import sys
from pathlib import Path

# Ensure project root is on sys.path so `recipe_api` can be imported when tests are run
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))  # noqa: E402

import pytest
from fastapi.testclient import TestClient

from recipe_api.app import create_app
from recipe_api.config import Settings
from recipe_api.db import Store
from recipe_api.reset import reset_to_base_seed


@pytest.fixture(scope="session")
def store():
    # one in-memory database shared by every connection (StaticPool)
    store = Store("sqlite:///:memory:")
    store.create_all()
    yield store
    store.dispose()


@pytest.fixture(autouse=True)
def base_seed(store):
    reset_to_base_seed(store)


@pytest.fixture(scope="session")
def app(store):
    return create_app(store=store, settings=Settings(env="test"))


@pytest.fixture(scope="session")
def client(app):
    return TestClient(app)


@pytest.fixture
def db(store):
    session = store.session()
    try:
        yield session
    finally:
        session.close()
