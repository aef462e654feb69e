import uuid

import pytest

BASE = "/api/accountables"


@pytest.fixture
async def secretariat(client) -> dict:
    resp = await client.post("/api/secretariats", json={"name": "Health"})
    return resp.json()


def payload(**overrides) -> dict:
    data = {"name": "Maria Souza", "email": "maria@example.com", "role": "Coordinator"}
    data.update(overrides)
    return data


@pytest.mark.asyncio
class TestAccountableEndpoints:

    async def test_create_and_get(self, client, secretariat):
        resp = await client.post(BASE, json=payload(secretariatId=secretariat["uuid"]))
        assert resp.status_code == 201
        created = resp.json()
        assert created["secretariatId"] == secretariat["uuid"]
        assert "id" not in created

        resp = await client.get(f"{BASE}/{created['uuid']}")
        assert resp.json() == created

    async def test_create_without_secretariat(self, client):
        resp = await client.post(BASE, json=payload())

        assert resp.status_code == 201
        assert resp.json()["secretariatId"] is None

    async def test_email_case_variant_is_409(self, client):
        """
        Behavior:
                - Create an accountable, then another with the same email in a different case.

        Importance:
                - Case-insensitive email uniqueness is a business rule; the second
                  request is a conflict and nothing is stored for it.
        """
        first = await client.post(BASE, json=payload(email="Maria@Example.com"))
        assert first.status_code == 201

        resp = await client.post(BASE, json=payload(name="Other", email="maria@EXAMPLE.com"))

        assert resp.status_code == 409
        assert resp.json()["type"].endswith("/duplicate")
        assert (await client.get(BASE)).json()["totalElements"] == 1

    async def test_update_to_taken_email_is_409(self, client):
        await client.post(BASE, json=payload(email="taken@example.com"))
        other = (await client.post(BASE, json=payload(email="free@example.com"))).json()

        resp = await client.put(f"{BASE}/{other['uuid']}", json=payload(email="TAKEN@example.com"))

        assert resp.status_code == 409
        current = (await client.get(f"{BASE}/{other['uuid']}")).json()
        assert current["email"] == "free@example.com"

    async def test_unknown_secretariat_is_404(self, client):
        resp = await client.post(BASE, json=payload(secretariatId=str(uuid.uuid4())))

        assert resp.status_code == 404

    @pytest.mark.parametrize("override,field", [
        ({"email": "not-an-email"}, "email"),
        ({"role": ""}, "role"),
        ({"name": None}, "name"),
        ({"secretariatId": "nope"}, "secretariatId"),
        ({"role": "r" * 51}, "role"),
    ])
    async def test_invalid_payload_is_400(self, client, override, field):
        resp = await client.post(BASE, json=payload(**override))

        assert resp.status_code == 400
        assert any(e.startswith(f"{field}:") for e in resp.json()["errors"])

    async def test_text_length_is_checked_after_trimming(self, client):
        resp = await client.post(BASE, json=payload(name=" " + "n" * 100 + " ", role="r" * 50 + "  "))

        assert resp.status_code == 201
        assert resp.json()["name"] == "n" * 100
        assert resp.json()["role"] == "r" * 50

    async def test_update_moves_between_secretariats(self, client, secretariat):
        created = (await client.post(BASE, json=payload(secretariatId=secretariat["uuid"]))).json()
        other = (await client.post("/api/secretariats", json={"name": "Education"})).json()

        resp = await client.put(f"{BASE}/{created['uuid']}", json=payload(role="Director", secretariatId=other["uuid"]))

        assert resp.status_code == 200
        assert resp.json()["secretariatId"] == other["uuid"]
        assert resp.json()["role"] == "Director"

    async def test_delete(self, client):
        created = (await client.post(BASE, json=payload())).json()

        assert (await client.delete(f"{BASE}/{created['uuid']}")).status_code == 204
        assert (await client.get(f"{BASE}/{created['uuid']}")).status_code == 404
        assert (await client.delete(f"{BASE}/{created['uuid']}")).status_code == 404

    async def test_sort_by_email(self, client):
        for email in ("c@example.com", "a@example.com", "b@example.com"):
            await client.post(BASE, json=payload(email=email))

        resp = await client.get(BASE, params={"sort": "email"})

        assert [a["email"] for a in resp.json()["content"]] == ["a@example.com", "b@example.com", "c@example.com"]
