# Basic tests
from fastapi.testclient import TestClient

from src.pocketnotes.main import app

client = TestClient(app)


def test_root_endpoint():
    """Test the root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Pocket Notes API"}


def test_health_endpoint():
    """Test health check."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_models_import():
    """Test that models can be imported."""
    from src.pocketnotes.core.models import Group, Note, User, group_members

    assert User.__tablename__ == "users"
    assert Group.__tablename__ == "groups"
    assert Note.__tablename__ == "notes"
    assert group_members.name == "group_members"


def test_unknown_route_uses_envelope():
    response = client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json()["success"] is False


def test_create_app_reads_process_settings():
    """A fresh app is built from the same settings the engine uses."""
    from src.pocketnotes.config import get_settings
    from src.pocketnotes.main import create_app

    fresh = create_app()
    assert fresh.title == get_settings().app_name
    assert fresh.version == get_settings().app_version
