import pytest
from fastapi.testclient import TestClient

from tasktracker.database import Database
from tasktracker.main import create_app


@pytest.fixture
def database(tmp_path):
    db = Database(f"sqlite:///{tmp_path / 'tasks.db'}")
    yield db
    db.close()


@pytest.fixture
def client(database):
    # entering the client runs the lifespan, which creates the tables
    with TestClient(create_app(database)) as c:
        yield c


@pytest.fixture
def session(database):
    database.open()
    s = database.session()
    try:
        yield s
    finally:
        s.close()
