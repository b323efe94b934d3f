"""
Integration tests for user management endpoints.
"""
import pytest
from httpx import AsyncClient


@pytest.mark.integration
@pytest.mark.asyncio
class TestUserEndpoints:

    async def test_admin_lists_users(self, client: AsyncClient, admin_token, test_organizer):
        response = await client.get("/api/v1/users/", headers={"Authorization": f"Bearer {admin_token}"})

        assert response.status_code == 200
        emails = {u["email"] for u in response.json()}
        assert emails == {"admin@example.com", "organizer@example.com"}

    async def test_organizer_cannot_list_users(self, client: AsyncClient, organizer_token):
        response = await client.get("/api/v1/users/", headers={"Authorization": f"Bearer {organizer_token}"})

        assert response.status_code == 403

    async def test_admin_creates_administrator(self, client: AsyncClient, admin_token):
        response = await client.post(
            "/api/v1/users/",
            headers={"Authorization": f"Bearer {admin_token}"},
            json={
                "username": "second-admin",
                "email": "admin2@example.com",
                "password": "Test123!@#",
                "role": "administrator",
            }
        )

        assert response.status_code == 201
        assert response.json()["role"] == "administrator"

    async def test_organizer_reads_own_record(self, client: AsyncClient, organizer_token, test_organizer):
        response = await client.get(
            f"/api/v1/users/{test_organizer.id}",
            headers={"Authorization": f"Bearer {organizer_token}"}
        )

        assert response.status_code == 200
        assert response.json()["username"] == "organizer"

    async def test_organizer_cannot_read_other_user(self, client: AsyncClient, organizer_token, other_organizer):
        response = await client.get(
            f"/api/v1/users/{other_organizer.id}",
            headers={"Authorization": f"Bearer {organizer_token}"}
        )

        assert response.status_code == 403

    async def test_admin_reads_missing_user(self, client: AsyncClient, admin_token):
        response = await client.get("/api/v1/users/9999", headers={"Authorization": f"Bearer {admin_token}"})

        assert response.status_code == 404

    async def test_organizer_updates_own_rate_limit(self, client: AsyncClient, organizer_token, test_organizer):
        response = await client.patch(
            f"/api/v1/users/{test_organizer.id}",
            headers={"Authorization": f"Bearer {organizer_token}"},
            json={"upload_rate_limit": 25}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["upload_rate_limit"] == 25
        assert data["email"] == "organizer@example.com"

    async def test_organizer_cannot_change_own_status(self, client: AsyncClient, organizer_token, test_organizer):
        response = await client.patch(
            f"/api/v1/users/{test_organizer.id}",
            headers={"Authorization": f"Bearer {organizer_token}"},
            json={"is_active": False}
        )

        assert response.status_code == 403

    async def test_null_for_required_field_is_rejected(self, client: AsyncClient, organizer_token, test_organizer):
        response = await client.patch(
            f"/api/v1/users/{test_organizer.id}",
            headers={"Authorization": f"Bearer {organizer_token}"},
            json={"username": None}
        )

        assert response.status_code == 422

    async def test_negative_rate_limit_is_rejected(self, client: AsyncClient, organizer_token, test_organizer):
        response = await client.patch(
            f"/api/v1/users/{test_organizer.id}",
            headers={"Authorization": f"Bearer {organizer_token}"},
            json={"upload_rate_limit": -1}
        )

        assert response.status_code == 422

    async def test_subscription_status_can_be_cleared(self, client: AsyncClient, admin_token, db_session, test_organizer):
        test_organizer.subscription_status = "premium"
        await db_session.commit()

        response = await client.patch(
            f"/api/v1/users/{test_organizer.id}",
            headers={"Authorization": f"Bearer {admin_token}"},
            json={"subscription_status": None}
        )

        assert response.status_code == 200
        assert response.json()["subscription_status"] is None

    async def test_admin_deactivates_user(self, client: AsyncClient, admin_token, test_organizer):
        response = await client.post(
            f"/api/v1/users/{test_organizer.id}/deactivate",
            headers={"Authorization": f"Bearer {admin_token}"}
        )

        assert response.status_code == 200
        assert response.json()["is_active"] is False

        login = await client.post(
            "/api/v1/auth/login",
            json={"email": test_organizer.email, "password": "Test123!@#"}
        )
        assert login.status_code == 403

    async def test_admin_deletes_user_with_events(self, client: AsyncClient, admin_token, populated_event):
        organizer_id = populated_event.organizer_id
        event_id = populated_event.id
        headers = {"Authorization": f"Bearer {admin_token}"}

        response = await client.delete(f"/api/v1/users/{organizer_id}", headers=headers)

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert (await client.get(f"/api/v1/users/{organizer_id}", headers=headers)).status_code == 404
        assert (await client.get(f"/api/v1/events/{event_id}", headers=headers)).status_code == 404

    async def test_organizer_cannot_delete_user(self, client: AsyncClient, organizer_token, other_organizer):
        response = await client.delete(
            f"/api/v1/users/{other_organizer.id}",
            headers={"Authorization": f"Bearer {organizer_token}"}
        )

        assert response.status_code == 403
