from __future__ import annotations

from typing import Any, Dict, Optional

import pytest
from fastapi.testclient import TestClient

from app.deps.authz import get_uid
from app.store import get_db
from main import app

TEST_UID = "user-1"


class FakeSnapshot:
    def __init__(self, doc_id: str, data: Optional[Dict[str, Any]]):
        self.id = doc_id
        self._data = data

    @property
    def exists(self) -> bool:
        return self._data is not None

    def to_dict(self) -> Optional[Dict[str, Any]]:
        return dict(self._data) if self._data is not None else None


class FakeDocument:
    def __init__(self, db: "FakeFirestore", path: str):
        self._db = db
        self.path = path
        self.id = path.rsplit("/", 1)[-1]

    def get(self) -> FakeSnapshot:
        return FakeSnapshot(self.id, self._db.docs.get(self.path))

    def set(self, data: Dict[str, Any], merge: bool = False) -> None:
        current = self._db.docs.get(self.path) if merge else None
        merged = dict(current or {})
        merged.update(data)
        self._db.docs[self.path] = merged

    def delete(self) -> None:
        self._db.docs.pop(self.path, None)

    def collection(self, name: str) -> "FakeCollection":
        return FakeCollection(self._db, f"{self.path}/{name}")


class FakeCollection:
    def __init__(self, db: "FakeFirestore", path: str):
        self._db = db
        self.path = path

    def document(self, doc_id: str) -> FakeDocument:
        return FakeDocument(self._db, f"{self.path}/{doc_id}")

    def stream(self):
        prefix = self.path + "/"
        for path in sorted(self._db.docs):
            rest = path[len(prefix):] if path.startswith(prefix) else None
            if rest and "/" not in rest:
                yield FakeSnapshot(rest, self._db.docs[path])


class FakeFirestore:
    def __init__(self):
        self.docs: Dict[str, Dict[str, Any]] = {}

    def collection(self, name: str) -> FakeCollection:
        return FakeCollection(self, name)


@pytest.fixture(autouse=True)
def _no_openai_key(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)


@pytest.fixture
def scenario_profile_dict() -> Dict[str, Any]:
    return {
        "age": 30,
        "salary": 80000,
        "country": "USA",
        "state": "GA",
        "savings": 10000,
        "monthlyInvestable": 1000,
        "debtPayments": 500,
        "emergencyFund": 5000,
    }


@pytest.fixture
def fake_db() -> FakeFirestore:
    return FakeFirestore()


@pytest.fixture
def client(fake_db):
    app.dependency_overrides[get_uid] = lambda: TEST_UID
    app.dependency_overrides[get_db] = lambda: fake_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
