"""Integration tests for profile, password and preferences endpoints."""

import pytest
from httpx import AsyncClient


class TestProfile:

    @pytest.mark.asyncio
    async def test_get_and_update_profile(self, client: AsyncClient, register_user):
        headers, user = await register_user("me@example.com", name="Me")

        profile = await client.get("/api/user/profile", headers=headers)
        updated = await client.put(
            "/api/user/profile",
            json={"name": "Still Me", "email": "new@example.com", "avatar": "https://img/me.png"},
            headers=headers,
        )

        assert profile.json()["id"] == user["id"]
        assert profile.json()["name"] == "Me"
        assert updated.status_code == 200
        assert updated.json()["email"] == "new@example.com"
        assert updated.json()["avatar"] == "https://img/me.png"

        relogin = await client.post(
            "/api/auth/login", json={"email": "new@example.com", "password": "secret123"}
        )
        assert relogin.status_code == 200

    @pytest.mark.asyncio
    async def test_taken_email_conflicts(self, client: AsyncClient, register_user):
        headers, _ = await register_user("me@example.com", name="Me")
        await register_user("taken@example.com", name="Someone")

        response = await client.put(
            "/api/user/profile",
            json={"name": "Me", "email": "taken@example.com"},
            headers=headers,
        )

        assert response.status_code == 409


class TestPassword:

    @pytest.mark.asyncio
    async def test_change_password_then_login(self, client: AsyncClient, register_user):
        headers, _ = await register_user("me@example.com", password="secret123")

        changed = await client.put(
            "/api/user/password",
            json={"currentPassword": "secret123", "newPassword": "better456"},
            headers=headers,
        )
        old = await client.post(
            "/api/auth/login", json={"email": "me@example.com", "password": "secret123"}
        )
        new = await client.post(
            "/api/auth/login", json={"email": "me@example.com", "password": "better456"}
        )

        assert changed.status_code == 200
        assert old.status_code == 401
        assert new.status_code == 200

    @pytest.mark.asyncio
    async def test_wrong_current_password(self, client: AsyncClient, auth_headers):
        response = await client.put(
            "/api/user/password",
            json={"currentPassword": "not-it", "newPassword": "better456"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "currentPassword"


class TestPreferences:

    @pytest.mark.asyncio
    async def test_defaults_before_anything_is_saved(self, client: AsyncClient, auth_headers):
        response = await client.get("/api/user/preferences", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {
            "version": 1,
            "theme": "light",
            "notifications": {"email": True, "push": True, "reminders": True},
            "dashboard": {"widgets": ["tasks", "pets", "analytics"], "layout": "default"},
        }

    @pytest.mark.asyncio
    async def test_saved_preferences_are_returned(self, client: AsyncClient, auth_headers):
        saved = await client.put(
            "/api/user/preferences",
            json={"preferences": {"theme": "dark", "notifications": {"push": False}}},
            headers=auth_headers,
        )
        loaded = await client.get("/api/user/preferences", headers=auth_headers)

        assert saved.status_code == 200
        assert loaded.json()["theme"] == "dark"
        assert loaded.json()["notifications"] == {"email": True, "push": False, "reminders": True}

    @pytest.mark.asyncio
    async def test_invalid_preferences_are_rejected(self, client: AsyncClient, auth_headers):
        unknown_key = await client.put(
            "/api/user/preferences",
            json={"preferences": {"fontSize": 18}},
            headers=auth_headers,
        )
        bad_value = await client.put(
            "/api/user/preferences",
            json={"preferences": {"dashboard": {"layout": "grid"}}},
            headers=auth_headers,
        )

        assert unknown_key.status_code == 400
        assert bad_value.status_code == 400
        assert bad_value.json()["errors"][0]["field"] == "preferences.dashboard.layout"

    @pytest.mark.asyncio
    async def test_unknown_top_level_keys_are_rejected(self, client: AsyncClient, auth_headers):
        response = await client.put(
            "/api/user/preferences",
            json={"preferences": {"theme": "dark"}, "junk": 1},
            headers=auth_headers,
        )
        loaded = await client.get("/api/user/preferences", headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "junk"
        assert loaded.json()["theme"] == "light"
