from seedgate.services.resources import LIBRARY_RESOURCES


class TestSeedResources:
    """POST /api/admin/seed-resources requires an admin caller."""

    def test_missing_token_is_unauthorized(self, client, db_conn):
        response = client.post("/api/admin/seed-resources")

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}
        db_conn.fetchrow.assert_not_awaited()
        db_conn.fetch.assert_not_awaited()

    def test_unknown_user_is_forbidden(self, client, db_conn, auth_headers):
        response = client.post("/api/admin/seed-resources", headers=auth_headers)

        assert response.status_code == 403
        assert response.json() == {"error": "Admin access required"}
        db_conn.fetch.assert_not_awaited()

    def test_non_admin_is_forbidden(self, client, db_conn, auth_headers):
        db_conn.fetchrow.return_value = {
            "id": "6f1c2d7e-8a4b-4c3d-9e2f-1a2b3c4d5e6f",
            "external_id": "user_2abc",
            "email": "student@example.com",
            "role": "student",
        }

        response = client.post("/api/admin/seed-resources", headers=auth_headers)

        assert response.status_code == 403
        db_conn.executemany.assert_not_awaited()

    def test_seeds_library_into_empty_table(
        self, client, db_conn, admin_user, auth_headers
    ):
        response = client.post("/api/admin/seed-resources", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": f"Seeded {len(LIBRARY_RESOURCES)} new resources",
            "total": len(LIBRARY_RESOURCES),
            "new_resources": [r["title"] for r in LIBRARY_RESOURCES],
        }
        db_conn.executemany.assert_awaited_once()

    def test_inserts_only_missing_resources(
        self, client, db_conn, admin_user, auth_headers
    ):
        db_conn.fetch.return_value = [{"title": "Production Optimization Masterclass"}]

        response = client.post("/api/admin/seed-resources", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == f"Seeded {len(LIBRARY_RESOURCES) - 1} new resources"
        assert "Production Optimization Masterclass" not in data["new_resources"]
        assert data["total"] == len(LIBRARY_RESOURCES)

    def test_nothing_to_insert(self, client, db_conn, admin_user, auth_headers):
        db_conn.fetch.return_value = [{"title": r["title"]} for r in LIBRARY_RESOURCES]

        response = client.post("/api/admin/seed-resources", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["message"] == "Seeded 0 new resources"
        assert response.json()["new_resources"] == []
        db_conn.executemany.assert_not_awaited()

    def test_database_failure_is_reported(self, client, db_conn, admin_user, auth_headers):
        db_conn.executemany.side_effect = RuntimeError("connection reset")

        response = client.post("/api/admin/seed-resources", headers=auth_headers)

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to seed resources"}
