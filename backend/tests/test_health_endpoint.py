from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi.testclient import TestClient


def test_health_returns_ok(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.text == "OK"
    assert response.headers["content-type"].startswith("text/plain")


def test_health_ignores_request_headers(client: TestClient) -> None:
    response = client.get(
        "/health",
        headers={"Accept": "application/json", "X-Probe": "kubelet"},
    )

    assert response.status_code == 200
    assert response.text == "OK"
