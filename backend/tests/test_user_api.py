"""
Project Backend — /user Endpoint Tests
========================================

What:  End-to-end tests of the /user routes over HTTPX against SQLite.

What we test:
    ✅ Valid registration → statusCode null, user stored ACTIVE
    ✅ Each password rule and bad email → HTTP 200 with statusCode 401
    ✅ find-all lists ACTIVE users only, with camelCase fields, no password
    ✅ update / delete / find-by-id, including in-band 404 and 409
    ✅ Over-long passwords and case-variant emails are rejected in-band
"""

import pytest

from app.models.user import DeletionStatus
from app.validation import ErrorMessage


async def create_user(client, data):
    response = await client.post("/user/create", json=data)
    assert response.status_code == 200
    return response.json()


class TestCreateUser:
    """Tests for POST /user/create."""

    @pytest.mark.asyncio
    async def test_create_user_returns_response(self, test_client, components, user_request_data):
        body = await create_user(test_client, user_request_data)

        assert body["statusCode"] is None
        assert body["description"] is None
        assert body["email"] == "albert@gmail.com"
        assert body["phoneNumber"] == "12345678"
        assert body["roleId"] == 1
        assert "password" not in body

        stored = await components.user_repository.find_by_id_and_is_deleted(
            body["id"], DeletionStatus.ACTIVE
        )
        assert stored is not None
        assert stored.is_deleted is DeletionStatus.ACTIVE

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "password, reason",
        [
            ("albert1234", ErrorMessage.PASSWORD_UPPERCASE),
            ("ALBERT1234", ErrorMessage.PASSWORD_LOWERCASE),
            ("albertALBERT", ErrorMessage.PASSWORD_NUMBER),
            ("albert", ErrorMessage.PASSWORD_LENGTH),
        ],
    )
    async def test_create_user_bad_password(
        self, test_client, components, user_request_data, password, reason
    ):
        user_request_data["password"] = password

        body = await create_user(test_client, user_request_data)

        assert body["statusCode"] == 401
        assert body["description"] == reason.value
        assert body["id"] is None
        assert await components.user_repository.find_by_is_deleted(DeletionStatus.ACTIVE) == []

    @pytest.mark.asyncio
    async def test_create_user_password_too_long(self, test_client, user_request_data):
        user_request_data["password"] = "Albert1234" + "x" * 80

        body = await create_user(test_client, user_request_data)

        assert body["statusCode"] == 401
        assert body["description"] == ErrorMessage.PASSWORD_TOO_LONG.value

    @pytest.mark.asyncio
    async def test_create_user_long_name_and_phone(self, test_client, user_request_data):
        user_request_data["name"] = "n" * 400
        user_request_data["phoneNumber"] = "1" * 120

        body = await create_user(test_client, user_request_data)

        assert body["statusCode"] is None
        assert body["name"] == "n" * 400
        assert body["phoneNumber"] == "1" * 120

    @pytest.mark.asyncio
    async def test_create_user_invalid_email(self, test_client, user_request_data):
        user_request_data["email"] = "albert"

        body = await create_user(test_client, user_request_data)

        assert body["statusCode"] == 401
        assert body["description"] == ErrorMessage.EMAIL.value

    @pytest.mark.asyncio
    async def test_create_user_missing_fields_reported_in_band(self, test_client):
        response = await test_client.post("/user/create", json={})

        assert response.status_code == 200
        assert response.json()["statusCode"] == 401

    @pytest.mark.asyncio
    async def test_create_user_duplicate_email(self, test_client, user_request_data):
        await create_user(test_client, user_request_data)

        body = await create_user(test_client, user_request_data)

        assert body["statusCode"] == 409
        assert body["description"] == ErrorMessage.EMAIL_ALREADY_USED.value

    @pytest.mark.asyncio
    async def test_create_user_duplicate_email_other_case(self, test_client, user_request_data):
        await create_user(test_client, user_request_data)
        user_request_data["email"] = "Albert@Gmail.com"

        body = await create_user(test_client, user_request_data)

        assert body["statusCode"] == 409
        assert body["description"] == ErrorMessage.EMAIL_ALREADY_USED.value


class TestFindUsers:
    """Tests for GET /user/find-all and GET /user/find-by-id."""

    @pytest.mark.asyncio
    async def test_find_all_returns_active_users(self, test_client, user_request_data):
        first = await create_user(test_client, user_request_data)
        user_request_data["email"] = "second@gmail.com"
        second = await create_user(test_client, user_request_data)
        await test_client.delete("/user/delete", params={"id": second["id"]})

        response = await test_client.get("/user/find-all")

        assert response.status_code == 200
        users = response.json()
        assert [u["id"] for u in users] == [first["id"]]
        assert all(u["statusCode"] is None for u in users)

    @pytest.mark.asyncio
    async def test_find_by_id(self, test_client, user_request_data):
        created = await create_user(test_client, user_request_data)

        response = await test_client.get("/user/find-by-id", params={"id": created["id"]})

        assert response.json()["email"] == "albert@gmail.com"

    @pytest.mark.asyncio
    async def test_find_by_id_unknown(self, test_client):
        response = await test_client.get("/user/find-by-id", params={"id": 999})

        assert response.status_code == 200
        assert response.json()["statusCode"] == 404


class TestUpdateAndDeleteUser:
    """Tests for POST /user/update and DELETE /user/delete."""

    @pytest.mark.asyncio
    async def test_update_user(self, test_client, user_request_data):
        created = await create_user(test_client, user_request_data)
        user_request_data["name"] = "Albert"
        user_request_data["phoneNumber"] = "87654321"

        response = await test_client.post(
            "/user/update", params={"id": created["id"]}, json=user_request_data
        )

        body = response.json()
        assert body["statusCode"] is None
        assert body["name"] == "Albert"
        assert body["phoneNumber"] == "87654321"

    @pytest.mark.asyncio
    async def test_update_user_invalid_password(self, test_client, user_request_data):
        created = await create_user(test_client, user_request_data)
        user_request_data["password"] = "albert1234"

        response = await test_client.post(
            "/user/update", params={"id": created["id"]}, json=user_request_data
        )

        assert response.json()["statusCode"] == 401
        assert response.json()["description"] == ErrorMessage.PASSWORD_UPPERCASE.value

    @pytest.mark.asyncio
    async def test_delete_user_is_soft(self, test_client, components, user_request_data):
        created = await create_user(test_client, user_request_data)

        response = await test_client.delete("/user/delete", params={"id": created["id"]})

        assert response.status_code == 200
        assert response.json()["statusCode"] is None
        repo = components.user_repository
        assert await repo.find_by_id_and_is_deleted(created["id"], DeletionStatus.ACTIVE) is None
        assert await repo.find_by_id_and_is_deleted(created["id"], DeletionStatus.DELETED) is not None

    @pytest.mark.asyncio
    async def test_delete_user_twice_reports_not_found(self, test_client, user_request_data):
        created = await create_user(test_client, user_request_data)
        await test_client.delete("/user/delete", params={"id": created["id"]})

        response = await test_client.delete("/user/delete", params={"id": created["id"]})

        assert response.json()["statusCode"] == 404

    @pytest.mark.asyncio
    async def test_email_reusable_after_delete(self, test_client, user_request_data):
        created = await create_user(test_client, user_request_data)
        await test_client.delete("/user/delete", params={"id": created["id"]})

        body = await create_user(test_client, user_request_data)

        assert body["statusCode"] is None
        assert body["id"] != created["id"]
