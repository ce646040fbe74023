import sys
import tempfile
from pathlib import Path

# ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient
from tasktracker.database import Database
from tasktracker.main import create_app

with tempfile.TemporaryDirectory() as tmp:
    database = Database(f"sqlite:///{Path(tmp) / 'quick.db'}")
    with TestClient(create_app(database)) as client:
        r = client.post("/api/tasks", json={"title": "Buy milk", "description": "2%", "status": "pending"})
        print('status', r.status_code)
        try:
            print('json:', r.json())
        except ValueError:
            print('text:', r.text)
