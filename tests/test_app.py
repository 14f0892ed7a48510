from unittest.mock import AsyncMock, MagicMock

import asyncpg


def test_health_without_database_pool(client):
    """Health check reports the missing pool as unhealthy."""
    response = client.get("/health")

    assert response.status_code == 503
    data = response.json()
    assert data["error"] == "Health check failed"
    assert data["details"]["status"] == "unhealthy"
    assert data["details"]["checks"]["api"]["status"] == "healthy"
    assert data["details"]["checks"]["database"]["status"] == "unhealthy"


def test_security_headers(client):
    response = client.get("/health")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert "Strict-Transport-Security" not in response.headers


def test_unknown_route_uses_error_body(client):
    response = client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_wrong_method_uses_error_body(client):
    response = client.get("/api/seed")

    assert response.status_code == 405
    assert response.json() == {"error": "Method Not Allowed"}


def test_openapi_lists_seed_routes(client):
    paths = client.get("/openapi.json").json()["paths"]

    assert "post" in paths["/api/admin/seed"]
    assert "post" in paths["/api/seed"]
    assert set(paths["/api/admin/seed-achievements"]) == {"get", "post"}
    assert set(paths["/api/admin/seed-resources"]) == {"post"}


def test_health_reports_pool_interface_error(client, monkeypatch):
    """A pool that cannot hand out connections is reported, not raised."""
    pool = MagicMock()
    pool.acquire.side_effect = asyncpg.exceptions.InterfaceError("pool is closing")
    monkeypatch.setattr("seedgate.main.get_pool", lambda: pool)

    response = client.get("/health")

    assert response.status_code == 503
    data = response.json()
    assert data["error"] == "Health check failed"
    database = data["details"]["checks"]["database"]
    assert database["status"] == "unhealthy"
    assert "pool is closing" in database["message"]


def test_health_with_reachable_database(client, monkeypatch):
    conn = MagicMock()
    conn.fetchval = AsyncMock(return_value=1)
    pool = MagicMock()
    pool.acquire.return_value.__aenter__ = AsyncMock(return_value=conn)
    pool.acquire.return_value.__aexit__ = AsyncMock(return_value=False)
    pool.get_size.return_value = 2
    pool.get_idle_size.return_value = 1
    monkeypatch.setattr("seedgate.main.get_pool", lambda: pool)

    response = client.get("/health")

    assert response.status_code == 200
    database = response.json()["data"]["checks"]["database"]
    assert database["status"] == "healthy"
    assert database["pool"] == {"size": 2, "idle": 1}
    conn.fetchval.assert_awaited_once_with("SELECT 1")
