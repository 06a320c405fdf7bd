"""Integration tests for the houses API."""

import pytest
from fastapi import status
from httpx import AsyncClient


@pytest.mark.integration
class TestHousesAPI:
    """Test house endpoints."""

    @pytest.mark.asyncio
    async def test_create_house(self, async_client: AsyncClient, owner_headers):
        response = await async_client.post(
            "/api/houses",
            headers=owner_headers,
            json={"name": "Gingerbread", "house_type": "house5", "timezone": "Europe/Paris"},
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["owner_id"] == "owner-1"
        assert data["role"] == "owner"
        assert data["family"] == "B"
        assert data["asset"] == "/assets/houses/house%20B2.svg"
        assert data["timezone"] == "Europe/Paris"

    @pytest.mark.asyncio
    async def test_create_house_defaults(self, async_client: AsyncClient, owner_headers):
        response = await async_client.post(
            "/api/houses", headers=owner_headers, json={"name": "Cabin"}
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["house_type"] == "house1"
        assert response.json()["timezone"] == "America/New_York"

    @pytest.mark.asyncio
    async def test_one_house_per_owner(self, async_client: AsyncClient, owner_headers):
        first = await async_client.post(
            "/api/houses", headers=owner_headers, json={"name": "First"}
        )
        second = await async_client.post(
            "/api/houses", headers=owner_headers, json={"name": "Second"}
        )

        assert first.status_code == status.HTTP_201_CREATED
        assert second.status_code == status.HTTP_409_CONFLICT

    @pytest.mark.asyncio
    async def test_invalid_timezone(self, async_client: AsyncClient, owner_headers):
        response = await async_client.post(
            "/api/houses",
            headers=owner_headers,
            json={"name": "Lost", "timezone": "Narnia/Lamppost"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "Narnia/Lamppost" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_unknown_template(self, async_client: AsyncClient, owner_headers):
        response = await async_client.post(
            "/api/houses",
            headers=owner_headers,
            json={"name": "Castle", "house_type": "castle"},
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_create_requires_login(self, async_client: AsyncClient):
        response = await async_client.post("/api/houses", json={"name": "Nobody's"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_my_house(self, async_client: AsyncClient, owner_headers):
        missing = await async_client.get("/api/houses/me", headers=owner_headers)
        assert missing.status_code == status.HTTP_404_NOT_FOUND

        created = await async_client.post(
            "/api/houses", headers=owner_headers, json={"name": "Mine"}
        )
        found = await async_client.get("/api/houses/me", headers=owner_headers)

        assert found.status_code == status.HTTP_200_OK
        assert found.json()["id"] == created.json()["id"]

    @pytest.mark.asyncio
    async def test_role_depends_on_caller(
        self, async_client: AsyncClient, make_house, owner_headers, visitor_headers
    ):
        house = await make_house()

        as_owner = await async_client.get(f"/api/houses/{house.id}", headers=owner_headers)
        as_visitor = await async_client.get(
            f"/api/houses/{house.id}", headers=visitor_headers
        )
        anonymous = await async_client.get(f"/api/houses/{house.id}")

        assert as_owner.json()["role"] == "owner"
        assert as_visitor.json()["role"] == "visitor"
        assert anonymous.json()["role"] == "visitor"

    @pytest.mark.asyncio
    async def test_unknown_house(self, async_client: AsyncClient):
        response = await async_client.get("/api/houses/does-not-exist")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_bad_token(self, async_client: AsyncClient, make_house):
        house = await make_house()

        response = await async_client.get(
            f"/api/houses/{house.id}", headers={"Authorization": "Bearer garbage"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_update_house(self, async_client: AsyncClient, make_house, owner_headers):
        house = await make_house()

        response = await async_client.put(
            f"/api/houses/{house.id}",
            headers=owner_headers,
            json={"name": "Renamed", "house_type": "house6", "timezone": "Asia/Tokyo"},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["name"] == "Renamed"
        assert data["family"] == "B"
        assert data["timezone"] == "Asia/Tokyo"

    @pytest.mark.asyncio
    async def test_update_by_visitor(
        self, async_client: AsyncClient, make_house, visitor_headers
    ):
        house = await make_house()

        response = await async_client.put(
            f"/api/houses/{house.id}", headers=visitor_headers, json={"name": "Stolen"}
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    @pytest.mark.asyncio
    async def test_update_invalid_timezone(
        self, async_client: AsyncClient, make_house, owner_headers
    ):
        house = await make_house()

        response = await async_client.put(
            f"/api/houses/{house.id}", headers=owner_headers, json={"timezone": "Moon/Base"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    @pytest.mark.asyncio
    async def test_update_blank_name(
        self, async_client: AsyncClient, make_house, owner_headers
    ):
        house = await make_house()

        response = await async_client.put(
            f"/api/houses/{house.id}", headers=owner_headers, json={"name": "   "}
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    @pytest.mark.asyncio
    async def test_update_strips_name(
        self, async_client: AsyncClient, make_house, owner_headers
    ):
        house = await make_house()

        response = await async_client.put(
            f"/api/houses/{house.id}", headers=owner_headers, json={"name": "  Renamed  "}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["name"] == "Renamed"

    @pytest.mark.asyncio
    async def test_second_owner_gets_own_house(
        self, async_client: AsyncClient, owner_headers, make_auth_headers
    ):
        await async_client.post("/api/houses", headers=owner_headers, json={"name": "One"})

        response = await async_client.post(
            "/api/houses", headers=make_auth_headers("owner-2"), json={"name": "Two"}
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["owner_id"] == "owner-2"
