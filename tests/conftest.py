"""
Shared fixtures
===============

JWT_SECRET must be present before app.core.config is imported.
"""

import os

os.environ.setdefault("JWT_SECRET", "test-secret-key")

import pytest
from fastapi.testclient import TestClient

from app.domains.documents.entities import (
    Activity, ActivityAction, Actor, Client, Document, DocumentType, Matter
)


ALICE = Actor(id="u1", name="Alice Adams")
BOB = Actor(id="u2", name="bob Brown")


def build_document(id: str, name: str = None, **overrides) -> Document:
    fields = dict(
        id=id,
        name=name if name is not None else f"{id}.pdf",
        type=DocumentType.FILE,
        cabinet_id="CAB1",
        client_id="",
        matter_id="",
        parent_id=None,
        path=f"/{id}",
        created_at="2024-01-01T00:00:00Z",
        updated_at="2024-01-01T00:00:00Z",
        last_active_at="2024-01-01T00:00:00Z",
        total_versions=1,
        added_by=ALICE,
        last_modified_by=ALICE,
        your_activity=Activity(action=ActivityAction.VIEWED, date="2024-03-04T10:00:00Z"),
    )
    fields.update(overrides)
    return Document(**fields)


@pytest.fixture
def make_document():
    """Factory for Document records with sensible defaults"""
    return build_document


@pytest.fixture
def clients():
    return [
        Client(id="C1", name="Acme Corporation", cabinet_id="CAB1"),
        Client(id="C2", name="beta Holdings", cabinet_id="CAB1"),
        Client(id="C3", name="Zenith Ltd", cabinet_id="CAB2"),
    ]


@pytest.fixture
def matters():
    return [
        Matter(id="M1", name="Restructuring", client_id="C1"),
        Matter(id="M2", name="Annual Compliance", client_id="C1"),
        Matter(id="M3", name="Patent Filing", client_id="C3"),
    ]


@pytest.fixture(scope="session")
def client():
    """Test client for the FastAPI app"""
    from app.main import app
    return TestClient(app)


@pytest.fixture(scope="session")
def auth_headers(client):
    """Bearer headers for the first demo user"""
    response = client.post(
        "/auth/login",
        json={"email": "sarah.anderson@law.com", "password": "password123"}
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
