# tests/test_health.py
from typing import Any


def test_health(client: Any) -> None:
    """The health endpoint responds without touching the database."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_root_describes_the_api(client: Any) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["docs"] == "/docs"
