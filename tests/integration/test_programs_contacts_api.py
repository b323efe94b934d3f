"""
Integration tests for event program and contact person endpoints.
"""
import pytest
from httpx import AsyncClient


@pytest.mark.integration
@pytest.mark.asyncio
class TestProgramEndpoints:

    async def test_create_program(self, client: AsyncClient, organizer_token, test_event):
        response = await client.post(
            "/api/v1/programs/",
            headers={"Authorization": f"Bearer {organizer_token}"},
            json={"event_id": test_event.id, "topic": "Ceremony", "time": "15:00", "order_index": 0}
        )

        assert response.status_code == 201
        assert response.json()["topic"] == "Ceremony"

    async def test_create_program_for_foreign_event(self, client: AsyncClient, other_organizer_token, test_event):
        response = await client.post(
            "/api/v1/programs/",
            headers={"Authorization": f"Bearer {other_organizer_token}"},
            json={"event_id": test_event.id, "topic": "Ceremony", "time": "15:00", "order_index": 0}
        )

        assert response.status_code == 403

    async def test_reorder_programs(self, client: AsyncClient, organizer_token, populated_event):
        headers = {"Authorization": f"Bearer {organizer_token}"}
        programs = (await client.get(f"/api/v1/programs/event/{populated_event.id}", headers=headers)).json()
        ids = [p["id"] for p in programs]

        response = await client.put(
            f"/api/v1/programs/event/{populated_event.id}/order",
            headers=headers,
            json={"program_ids": list(reversed(ids))}
        )

        assert response.status_code == 200
        assert [p["topic"] for p in response.json()] == ["Dinner", "Ceremony"]
        assert [p["order_index"] for p in response.json()] == [0, 1]

    async def test_update_program(self, client: AsyncClient, organizer_token, populated_event):
        headers = {"Authorization": f"Bearer {organizer_token}"}
        programs = (await client.get(f"/api/v1/programs/event/{populated_event.id}", headers=headers)).json()

        response = await client.patch(f"/api/v1/programs/{programs[0]['id']}", headers=headers, json={"time": "15:30"})

        assert response.status_code == 200
        assert response.json()["time"] == "15:30"
        assert response.json()["topic"] == "Ceremony"

    async def test_delete_missing_program(self, client: AsyncClient, organizer_token):
        response = await client.delete("/api/v1/programs/9999", headers={"Authorization": f"Bearer {organizer_token}"})

        assert response.status_code == 404


@pytest.mark.integration
@pytest.mark.asyncio
class TestContactEndpoints:

    async def test_organizer_sees_all_contacts(self, client: AsyncClient, organizer_token, populated_event):
        response = await client.get(
            f"/api/v1/contacts/event/{populated_event.id}",
            headers={"Authorization": f"Bearer {organizer_token}"}
        )

        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Clara", "Dieter"]

    async def test_create_contact(self, client: AsyncClient, organizer_token, test_event):
        response = await client.post(
            "/api/v1/contacts/",
            headers={"Authorization": f"Bearer {organizer_token}"},
            json={"event_id": test_event.id, "name": "Hanna", "email": "hanna@example.com", "is_contact_person": True}
        )

        assert response.status_code == 201
        assert response.json()["is_contact_person"] is True

    async def test_clear_phone_number(self, client: AsyncClient, organizer_token, populated_event):
        headers = {"Authorization": f"Bearer {organizer_token}"}
        contacts = (await client.get(f"/api/v1/contacts/event/{populated_event.id}", headers=headers)).json()
        clara = contacts[0]

        response = await client.patch(f"/api/v1/contacts/{clara['id']}", headers=headers, json={"phone_number": None})

        assert response.status_code == 200
        assert response.json()["phone_number"] is None
        assert response.json()["is_contact_person"] is True

    async def test_rename_keeps_phone_and_email(self, client: AsyncClient, organizer_token, populated_event):
        headers = {"Authorization": f"Bearer {organizer_token}"}
        contacts = (await client.get(f"/api/v1/contacts/event/{populated_event.id}", headers=headers)).json()
        clara, dieter = contacts

        renamed_clara = await client.patch(f"/api/v1/contacts/{clara['id']}", headers=headers, json={"name": "Clara B."})
        renamed_dieter = await client.patch(f"/api/v1/contacts/{dieter['id']}", headers=headers, json={"name": "Dieter K."})

        assert renamed_clara.status_code == 200
        assert renamed_clara.json()["name"] == "Clara B."
        assert renamed_clara.json()["phone_number"] == "+49 40 123"
        assert renamed_clara.json()["email"] is None
        assert renamed_dieter.json()["name"] == "Dieter K."
        assert renamed_dieter.json()["email"] == "dieter@example.com"
        assert renamed_dieter.json()["phone_number"] is None

    async def test_delete_contact(self, client: AsyncClient, organizer_token, populated_event):
        headers = {"Authorization": f"Bearer {organizer_token}"}
        contacts = (await client.get(f"/api/v1/contacts/event/{populated_event.id}", headers=headers)).json()

        response = await client.delete(f"/api/v1/contacts/{contacts[1]['id']}", headers=headers)

        assert response.status_code == 200
        remaining = (await client.get(f"/api/v1/contacts/event/{populated_event.id}", headers=headers)).json()
        assert [c["name"] for c in remaining] == ["Clara"]

    async def test_other_organizer_cannot_edit_contact(self, client: AsyncClient, other_organizer_token, organizer_token, populated_event):
        contacts = (await client.get(
            f"/api/v1/contacts/event/{populated_event.id}",
            headers={"Authorization": f"Bearer {organizer_token}"}
        )).json()

        response = await client.patch(
            f"/api/v1/contacts/{contacts[0]['id']}",
            headers={"Authorization": f"Bearer {other_organizer_token}"},
            json={"name": "Mallory"}
        )

        assert response.status_code == 403
