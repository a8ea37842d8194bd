"""API tests for per-user settings."""

from mentora.stores.models import DEFAULT_SETTINGS

from conftest import login


class TestSettings:
    async def test_defaults_for_new_user(self, client):
        body = (await client.get("/api/settings/ada@example.com")).json()

        assert body == {"success": True, "settings": DEFAULT_SETTINGS}

    async def test_merge_keeps_other_fields(self, client):
        await client.post("/api/settings/ada@example.com", json={"theme": "dark"})
        response = await client.post("/api/settings/ada@example.com", json={"language": "fr"})

        settings = response.json()["settings"]
        assert settings["theme"] == "dark"
        assert settings["language"] == "fr"
        assert settings["fontSize"] == "medium"
        assert "updatedAt" in settings

    async def test_later_value_wins(self, client):
        await client.post("/api/settings/ada@example.com", json={"theme": "dark"})
        await client.post("/api/settings/ada@example.com", json={"theme": "sepia"})

        body = (await client.get("/api/settings/ada@example.com")).json()
        assert body["settings"]["theme"] == "sepia"

    async def test_users_isolated(self, client):
        await client.post("/api/settings/ada@example.com", json={"theme": "dark"})

        body = (await client.get("/api/settings/alan@example.com")).json()
        assert body["settings"]["theme"] == "light"

    async def test_user_snapshot_refreshed(self, client, stores):
        await login(client, "ada@example.com", "Ada")

        await client.post("/api/settings/ada@example.com", json={"voiceSpeed": "fast"})

        assert stores.users.get("ada@example.com").settings["voiceSpeed"] == "fast"

    async def test_saved_settings_survive_relogin(self, client):
        await login(client, "ada@example.com", "Ada")
        await client.post("/api/settings/ada@example.com", json={"theme": "dark"})

        body = await login(client, "ada@example.com", "Ada")

        assert body["user"]["settings"]["theme"] == "dark"

    async def test_non_object_body_rejected(self, client):
        response = await client.post("/api/settings/ada@example.com", json=["theme"])

        assert response.status_code == 400
