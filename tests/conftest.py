import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("TWILIO_ENABLED", "false")
os.environ.setdefault("SEED_DATABASE", "false")

from typing import List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.main import app
from app.models.visitor import Visitor
from app.repositories.visitor_store import VisitorStore


class InMemoryVisitorStore(VisitorStore):
    """Dict-backed store used to exercise the services without a database."""

    def __init__(self):
        self.records = {}
        self._next_id = 1

    def get(self, visitor_id: int) -> Optional[Visitor]:
        return self.records.get(visitor_id)

    def find_by_field(self, field: str, value: str) -> Optional[Visitor]:
        for visitor in self.list_all():
            if getattr(visitor, field) == value:
                return visitor
        return None

    def find_by_substring(self, field: str, text: str) -> List[Visitor]:
        needle = text.lower()
        return [v for v in self.list_all() if needle in (getattr(v, field) or "").lower()]

    def insert(self, visitor: Visitor) -> Visitor:
        visitor.id = self._next_id
        self._next_id += 1
        self.records[visitor.id] = visitor
        return visitor

    def update(self, visitor: Visitor) -> Visitor:
        self.records[visitor.id] = visitor
        return visitor

    def list_all(self) -> List[Visitor]:
        return [self.records[key] for key in sorted(self.records)]


@pytest.fixture
def memory_store():
    return InMemoryVisitorStore()


@pytest.fixture
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    TestingSession = sessionmaker(bind=db_engine, autocommit=False, autoflush=False, expire_on_commit=False)
    session = TestingSession()
    yield session
    session.close()


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def add_visitor(client):
    """Register a visitor through the resident API and return the response JSON."""
    def _add(**payload):
        response = client.post("/api/resident/addVisitor", json=payload)
        assert response.status_code == 200, response.text
        return response.json()
    return _add
