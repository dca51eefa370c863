import os
import sys
import tempfile
import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Point the app at a throwaway SQLite file before gamestore_api is imported.
_TEST_DB_DIR = tempfile.mkdtemp(prefix="gamestore-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TEST_DB_DIR, 'gamestore.db')}"

from gamestore_api.main import app


@pytest.fixture(scope="session")
def client():
    with TestClient(app) as c:
        yield c


def game_payload(**overrides) -> dict:
    payload = {
        "name": "Street Fighter II",
        "genreId": 1,
        "price": 19.99,
        "releaseDate": "1992-07-15",
    }
    payload.update(overrides)
    return payload
