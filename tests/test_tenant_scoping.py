"""Tests for restaurant scoping and isolation"""

import pytest
from httpx import AsyncClient
from sqlalchemy import select

from app.models.menu import MenuItem
from tests.test_orders import place_order


@pytest.fixture
async def other_menu_item(test_db, other_restaurant):
    item = MenuItem(
        restaurant_id=other_restaurant.id,
        name="Sushi Roll",
        description="Fresh salmon sushi",
        price_cents=1899,
        category="Sushi",
        is_available=True,
    )
    test_db.add(item)
    await test_db.commit()
    return item


@pytest.mark.asyncio
async def test_public_menu_isolation(client: AsyncClient, test_restaurant, test_menu_items, other_menu_item):
    """Each restaurant's menu only lists its own items"""
    response = await client.get(f"/api/menus/{test_restaurant.id}", params={"name": "sushi"})

    assert response.status_code == 200
    assert response.json()["menus"] == []


@pytest.mark.asyncio
async def test_cannot_delete_other_restaurants_menu_item(
    owner_client: AsyncClient, test_db, other_menu_item
):
    response = await owner_client.delete(f"/api/menus/{other_menu_item.id}")

    assert response.status_code == 404
    assert response.json()["error"] == "Menu item not found or not authorized"
    assert (await test_db.execute(select(MenuItem).where(MenuItem.id == other_menu_item.id))).scalar_one()


@pytest.mark.asyncio
async def test_cannot_update_other_restaurants_menu_item(owner_client: AsyncClient, other_menu_item):
    response = await owner_client.put(f"/api/menus/{other_menu_item.id}", data={"price": "1"})

    assert response.status_code == 404
    assert other_menu_item.price_cents == 1899


@pytest.mark.asyncio
async def test_orders_are_scoped_to_restaurant(
    client: AsyncClient,
    owner_client: AsyncClient,
    other_owner_client: AsyncClient,
    test_restaurant,
    test_menu_items,
):
    order = (await place_order(client, test_restaurant, [(test_menu_items[0], 1)])).json()["order"]

    response = await other_owner_client.get("/api/orders")
    assert response.json()["total"] == 0

    response = await other_owner_client.get(f"/api/orders/{order['id']}")
    assert response.status_code == 404

    response = await other_owner_client.patch(
        f"/api/orders/{order['id']}/status", json={"status": "Cancelled"}
    )
    assert response.status_code == 404

    response = await owner_client.get(f"/api/orders/{order['id']}")
    assert response.status_code == 200
    assert response.json()["order"]["status"] == "Pending"


@pytest.mark.asyncio
async def test_owner_cannot_query_other_restaurant(
    owner_client: AsyncClient, other_restaurant
):
    response = await owner_client.get("/api/orders", params={"restaurant_id": str(other_restaurant.id)})
    assert response.status_code == 403

    response = await owner_client.get("/api/analytics", params={"restaurant_id": str(other_restaurant.id)})
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_admin_sees_all_orders(
    client: AsyncClient,
    admin_client: AsyncClient,
    test_restaurant,
    test_menu_items,
    other_restaurant,
    other_menu_item,
):
    await place_order(client, test_restaurant, [(test_menu_items[0], 1)])
    await place_order(client, other_restaurant, [(other_menu_item, 2)])

    response = await admin_client.get("/api/orders")
    assert response.json()["total"] == 2

    response = await admin_client.get("/api/orders", params={"restaurant_id": str(other_restaurant.id)})
    assert response.json()["total"] == 1


@pytest.mark.asyncio
async def test_owner_cannot_edit_other_restaurant_settings(
    owner_client: AsyncClient, other_restaurant
):
    response = await owner_client.put(
        f"/api/restaurants/{other_restaurant.id}/settings",
        json={"name": "Hijacked"},
    )

    assert response.status_code == 403
    assert other_restaurant.name == "Other Restaurant"
