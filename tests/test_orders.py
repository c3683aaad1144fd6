"""Tests for order placement and the kitchen workflow"""

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select

from app.models.menu import MenuItem
from app.models.order import Order, OrderItem, OrderStatus
from app.services.pricing import MAX_CENTS


async def place_order(client: AsyncClient, restaurant, items, **extra):
    payload = {
        "restaurant_id": str(restaurant.id),
        "table_number": 4,
        "items": [{"menu_id": str(item.id), "quantity": quantity} for item, quantity in items],
    }
    payload.update(extra)
    return await client.post("/api/orders", json=payload)


async def _count(db, model) -> int:
    return (await db.execute(select(func.count(model.id)))).scalar()


@pytest.mark.asyncio
async def test_place_order_writes_order_items_and_status(
    client: AsyncClient, test_db, test_restaurant, test_menu_items
):
    margherita, diavola, _ = test_menu_items

    response = await place_order(
        client,
        test_restaurant,
        [(margherita, 2), (diavola, 1)],
        customer_details={"name": "Ada", "contact": "ada@example.com"},
        special_requests="No basil",
    )

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "Order placed successfully"

    order = data["order"]
    assert order["status"] == "Pending"
    assert order["priority"] == "Normal"
    assert order["customer_name"] == "Ada"
    assert order["total_cents"] == 2 * 1499 + 1699
    assert order["total"] == "46.97"
    assert {item["name"] for item in order["items"]} == {"Margherita Pizza", "Diavola Pizza"}

    assert await _count(test_db, Order) == 1
    assert await _count(test_db, OrderItem) == 2
    assert await _count(test_db, OrderStatus) == 1


@pytest.mark.asyncio
async def test_place_order_uses_menu_prices(client: AsyncClient, test_restaurant, test_menu_items):
    margherita = test_menu_items[0]

    response = await client.post(
        "/api/orders",
        json={
            "restaurant_id": str(test_restaurant.id),
            "table_number": 1,
            "items": [{"menu_id": str(margherita.id), "quantity": 1, "price": 0.01}],
        },
    )

    assert response.status_code == 201
    assert response.json()["order"]["items"][0]["price_cents"] == 1499


@pytest.mark.asyncio
async def test_place_order_rejects_unavailable_item(
    client: AsyncClient, test_db, test_restaurant, test_menu_items
):
    margherita, _, salad = test_menu_items

    response = await place_order(client, test_restaurant, [(margherita, 1), (salad, 1)])

    assert response.status_code == 400
    assert "Caesar Salad" in response.json()["error"]
    assert await _count(test_db, Order) == 0
    assert await _count(test_db, OrderItem) == 0


@pytest.mark.asyncio
async def test_place_order_rejects_other_restaurants_items(
    client: AsyncClient, test_db, test_menu_items, other_restaurant
):
    response = await place_order(client, other_restaurant, [(test_menu_items[0], 1)])

    assert response.status_code == 400
    assert response.json()["error"].startswith("Unknown menu items")
    assert await _count(test_db, Order) == 0


@pytest.mark.asyncio
async def test_place_order_requires_items(client: AsyncClient, test_restaurant):
    response = await place_order(client, test_restaurant, [])

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_place_order_unknown_restaurant(client: AsyncClient, test_db):
    response = await client.post(
        "/api/orders",
        json={
            "restaurant_id": "00000000-0000-0000-0000-000000000000",
            "table_number": 1,
            "items": [{"menu_id": "00000000-0000-0000-0000-000000000001", "quantity": 1}],
        },
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_list_orders_paginates(
    client: AsyncClient, owner_client: AsyncClient, test_restaurant, test_menu_items
):
    for _ in range(3):
        await place_order(client, test_restaurant, [(test_menu_items[0], 1)])

    response = await owner_client.get("/api/orders", params={"page": 1, "page_size": 2})

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 3
    assert len(data["items"]) == 2
    assert data["page_size"] == 2


@pytest.mark.asyncio
async def test_order_history_filters_by_status(
    client: AsyncClient, owner_client: AsyncClient, test_restaurant, test_menu_items
):
    first = (await place_order(client, test_restaurant, [(test_menu_items[0], 1)])).json()["order"]
    await place_order(client, test_restaurant, [(test_menu_items[1], 1)])

    await owner_client.patch(f"/api/orders/{first['id']}/status", json={"status": "Completed"})

    response = await owner_client.get("/api/orders/history", params={"status": "Completed"})

    assert response.status_code == 200
    orders = response.json()["orders"]
    assert [order["id"] for order in orders] == [first["id"]]


@pytest.mark.asyncio
async def test_update_order_status(
    client: AsyncClient, owner_client: AsyncClient, test_restaurant, test_menu_items
):
    order = (await place_order(client, test_restaurant, [(test_menu_items[0], 1)])).json()["order"]

    response = await owner_client.patch(
        f"/api/orders/{order['id']}/status",
        json={"status": "In Progress", "priority": "High"},
    )

    assert response.status_code == 200
    status = response.json()["status"]
    assert status["status"] == "In Progress"
    assert status["priority"] == "High"
    assert status["time_elapsed"] >= 0


@pytest.mark.asyncio
async def test_update_order_status_rejects_unknown_value(
    client: AsyncClient, owner_client: AsyncClient, test_restaurant, test_menu_items
):
    order = (await place_order(client, test_restaurant, [(test_menu_items[0], 1)])).json()["order"]

    response = await owner_client.patch(f"/api/orders/{order['id']}/status", json={"status": "Eaten"})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_update_order_quantities(
    client: AsyncClient, owner_client: AsyncClient, test_restaurant, test_menu_items
):
    margherita, diavola, _ = test_menu_items
    order = (await place_order(client, test_restaurant, [(margherita, 1)])).json()["order"]

    response = await owner_client.patch(
        f"/api/orders/{order['id']}",
        json={"table_number": 9, "items": [{"menu_id": str(margherita.id), "quantity": 3}]},
    )

    assert response.status_code == 200
    updated = response.json()["order"]
    assert updated["table_number"] == 9
    assert updated["total_cents"] == 3 * 1499

    response = await owner_client.patch(
        f"/api/orders/{order['id']}",
        json={"items": [{"menu_id": str(diavola.id), "quantity": 1}]},
    )
    assert response.status_code == 400


@pytest.mark.asyncio
@pytest.mark.parametrize("line", [{"quantity": 10**20}, {"quantity": 1001}, {"quantity": 0}])
async def test_place_order_rejects_out_of_range_quantity(
    client: AsyncClient, test_db, test_restaurant, test_menu_items, line
):
    response = await client.post(
        "/api/orders",
        json={
            "restaurant_id": str(test_restaurant.id),
            "table_number": 1,
            "items": [{"menu_id": str(test_menu_items[0].id), **line}],
        },
    )

    assert response.status_code == 400
    assert await _count(test_db, Order) == 0


@pytest.mark.asyncio
async def test_place_order_rejects_out_of_range_table(client: AsyncClient, test_db, test_restaurant, test_menu_items):
    response = await place_order(client, test_restaurant, [(test_menu_items[0], 1)], table_number=10**12)

    assert response.status_code == 400
    assert await _count(test_db, Order) == 0


@pytest.mark.asyncio
async def test_place_order_rejects_total_overflow(client: AsyncClient, test_db, test_restaurant):
    caviar = MenuItem(restaurant_id=test_restaurant.id, name="Caviar", category="Luxury", price_cents=MAX_CENTS)
    test_db.add(caviar)
    await test_db.commit()

    response = await place_order(client, test_restaurant, [(caviar, 2)])

    assert response.status_code == 400
    assert response.json() == {"error": "Order total too large"}
    assert await _count(test_db, Order) == 0
    assert await _count(test_db, OrderItem) == 0


@pytest.mark.asyncio
async def test_update_order_rejects_out_of_range_quantity(
    client: AsyncClient, owner_client: AsyncClient, test_restaurant, test_menu_items
):
    margherita = test_menu_items[0]
    order = (await place_order(client, test_restaurant, [(margherita, 2)])).json()["order"]

    response = await owner_client.patch(
        f"/api/orders/{order['id']}",
        json={"items": [{"menu_id": str(margherita.id), "quantity": 10**20}]},
    )
    assert response.status_code == 400

    response = await owner_client.get(f"/api/orders/{order['id']}")
    assert response.json()["order"]["total_cents"] == 2 * 1499


@pytest.mark.asyncio
async def test_update_order_rejects_total_overflow(
    client: AsyncClient, owner_client: AsyncClient, test_db, test_restaurant
):
    caviar = MenuItem(restaurant_id=test_restaurant.id, name="Caviar", category="Luxury", price_cents=MAX_CENTS)
    test_db.add(caviar)
    await test_db.commit()
    order = (await place_order(client, test_restaurant, [(caviar, 1)])).json()["order"]

    response = await owner_client.patch(
        f"/api/orders/{order['id']}",
        json={"table_number": 7, "items": [{"menu_id": str(caviar.id), "quantity": 2}]},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Order total too large"}
    stored = (await owner_client.get(f"/api/orders/{order['id']}")).json()["order"]
    assert stored["total_cents"] == MAX_CENTS
    assert stored["table_number"] == 4


@pytest.mark.asyncio
async def test_assign_order(
    client: AsyncClient, owner_client: AsyncClient, test_restaurant, test_menu_items
):
    order = (await place_order(client, test_restaurant, [(test_menu_items[0], 1)])).json()["order"]

    response = await owner_client.patch(
        f"/api/orders/{order['id']}/assign",
        json={"kitchen_section": "Grill", "staff_member": "Luca"},
    )

    assert response.status_code == 200
    assigned = response.json()["order"]
    assert assigned["kitchen_section"] == "Grill"
    assert assigned["staff_member"] == "Luca"


@pytest.mark.asyncio
async def test_orders_require_session(client: AsyncClient):
    response = await client.get("/api/orders")

    assert response.status_code == 401
