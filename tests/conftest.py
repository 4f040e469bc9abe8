import pytest
from fastapi.testclient import TestClient

from material_tracker.database import create_db_and_tables, make_engine
from material_tracker.main import app
from material_tracker.services.persistence import InMemoryKeyValueStore, SQLModelKeyValueStore
from material_tracker.services.repository import RequestRepository
from material_tracker.services.tracker import Tracker, get_tracker


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def repo(store) -> RequestRepository:
    return RequestRepository.from_bridge(store)


@pytest.fixture
def engine():
    eng = make_engine("sqlite://")
    create_db_and_tables(eng)
    return eng


@pytest.fixture
def tracker(engine) -> Tracker:
    return Tracker(SQLModelKeyValueStore(engine))


@pytest.fixture
def client(tracker):
    app.dependency_overrides[get_tracker] = lambda: tracker
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
