"""Tests for menu management and the public menu"""

import os

import pytest
from httpx import AsyncClient
from sqlalchemy import select

from app.config import settings
from app.models.menu import MenuItem


def _names(response) -> list:
    return [item["name"] for item in response.json()["menus"]]


def _stored_files() -> list:
    if not os.path.isdir(settings.uploads_path):
        return []
    return sorted(os.listdir(settings.uploads_path))


@pytest.mark.asyncio
async def test_create_menu_item(owner_client: AsyncClient, test_restaurant):
    response = await owner_client.post(
        "/api/menus",
        data={
            "name": "Lasagna",
            "description": "Layers of pasta and ragu",
            "category": "Pasta",
            "price": "12.50",
            "dishTags": "hearty, baked ,",
            "popularity": "High",
            "rating": "4.5",
            "availabilitySchedule": "Mon-Fri, 11:00-14:00",
        },
    )

    assert response.status_code == 201
    menu = response.json()["menu"]
    assert menu["restaurant_id"] == str(test_restaurant.id)
    assert menu["price_cents"] == 1250
    assert menu["price"] == "12.50"
    assert menu["dish_tags"] == ["hearty", "baked"]
    assert menu["is_available"] is True
    assert menu["availability_schedule"] == {"days": "Mon-Fri", "timeRange": "11:00-14:00"}


@pytest.mark.asyncio
async def test_create_menu_item_with_image(owner_client: AsyncClient):
    response = await owner_client.post(
        "/api/menus",
        data={"name": "Focaccia", "description": "Rosemary bread", "category": "Bread", "price": "4"},
        files={"image": ("../focaccia photo.png", b"\x89PNG fake", "image/png")},
    )

    assert response.status_code == 201
    image_url = response.json()["menu"]["image_url"]
    assert image_url.startswith("/uploads/")
    assert image_url.endswith("-focaccia_photo.png")


@pytest.mark.asyncio
async def test_create_menu_item_rejects_wrong_file_type(owner_client: AsyncClient):
    response = await owner_client.post(
        "/api/menus",
        data={"name": "Focaccia", "description": "Rosemary bread", "category": "Bread", "price": "4"},
        files={"image": ("notes.txt", b"hello", "text/plain")},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Unsupported file type"


@pytest.mark.asyncio
@pytest.mark.parametrize("price", ["-1", "abc", "NaN", "1e30"])
async def test_create_menu_item_invalid_price(owner_client: AsyncClient, test_db, price):
    response = await owner_client.post(
        "/api/menus",
        data={"name": "Bad", "description": "Bad price", "category": "Misc", "price": price},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid price"}
    assert (await test_db.execute(select(MenuItem))).scalars().all() == []


@pytest.mark.asyncio
async def test_create_menu_item_missing_fields(owner_client: AsyncClient):
    response = await owner_client.post("/api/menus", data={"name": "Nameless"})

    assert response.status_code == 400
    assert response.json()["error"] == "Missing required fields"


@pytest.mark.asyncio
async def test_create_menu_item_requires_owner(admin_client: AsyncClient, client: AsyncClient):
    form = {"name": "Soup", "description": "Hot", "category": "Soups", "price": "5"}

    response = await client.post("/api/menus", data=form)
    assert response.status_code == 401

    response = await admin_client.post("/api/menus", data=form)
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_public_menu_lists_available_first(client: AsyncClient, test_restaurant, test_menu_items):
    response = await client.get(f"/api/menus/{test_restaurant.id}", params={"sort": "price_low"})

    assert response.status_code == 200
    assert response.json()["total"] == 3
    # Salad is cheapest but sold out, so it sorts last
    assert _names(response) == ["Margherita Pizza", "Diavola Pizza", "Caesar Salad"]


@pytest.mark.asyncio
async def test_public_menu_filters(client: AsyncClient, test_restaurant, test_menu_items):
    url = f"/api/menus/{test_restaurant.id}"

    response = await client.get(url, params={"category": "pizza"})
    assert sorted(_names(response)) == ["Diavola Pizza", "Margherita Pizza"]

    response = await client.get(url, params={"dish_tag": "spicy"})
    assert _names(response) == ["Diavola Pizza"]

    response = await client.get(url, params={"availability": "not_available"})
    assert _names(response) == ["Caesar Salad"]

    response = await client.get(url, params={"min_price": "11", "max_price": "16"})
    assert _names(response) == ["Margherita Pizza"]

    response = await client.get(url, params={"name": "margh"})
    assert _names(response) == ["Margherita Pizza"]


@pytest.mark.asyncio
async def test_public_menu_sorts(client: AsyncClient, test_restaurant, test_menu_items):
    url = f"/api/menus/{test_restaurant.id}"

    response = await client.get(url, params={"sort": "price_high"})
    assert _names(response) == ["Diavola Pizza", "Margherita Pizza", "Caesar Salad"]

    response = await client.get(url, params={"sort": "highest_rated"})
    assert _names(response) == ["Margherita Pizza", "Diavola Pizza", "Caesar Salad"]

    response = await client.get(url, params={"sort": "most_popular"})
    assert _names(response) == ["Margherita Pizza", "Diavola Pizza", "Caesar Salad"]


@pytest.mark.asyncio
async def test_public_menu_rejects_unknown_sort(client: AsyncClient, test_restaurant):
    response = await client.get(f"/api/menus/{test_restaurant.id}", params={"sort": "cheapest"})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_public_menu_unknown_restaurant(client: AsyncClient, test_db):
    response = await client.get("/api/menus/00000000-0000-0000-0000-000000000000")

    assert response.status_code == 404
    assert response.json() == {"error": "Restaurant not found"}


@pytest.mark.asyncio
async def test_update_menu_item(owner_client: AsyncClient, test_menu_items):
    pizza = test_menu_items[0]

    response = await owner_client.put(
        f"/api/menus/{pizza.id}",
        data={"price": "15.25", "dishTags": "vegetarian,classic"},
    )

    assert response.status_code == 200
    menu = response.json()["menu"]
    assert menu["price_cents"] == 1525
    assert menu["dish_tags"] == ["vegetarian", "classic"]
    assert menu["name"] == "Margherita Pizza"


@pytest.mark.asyncio
async def test_update_menu_item_without_fields(owner_client: AsyncClient, test_menu_items):
    response = await owner_client.put(f"/api/menus/{test_menu_items[0].id}", data={})

    assert response.status_code == 400
    assert response.json()["error"] == "No fields to update"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "field,value",
    [("rating", "9"), ("popularity", "Legendary"), ("price", "abc")],
)
async def test_create_menu_item_invalid_field_stores_no_files(owner_client: AsyncClient, test_db, field, value):
    before = _stored_files()
    form = {"name": "Focaccia", "description": "Rosemary bread", "category": "Bread", "price": "4"}
    form[field] = value

    response = await owner_client.post(
        "/api/menus",
        data=form,
        files={"image": ("focaccia.png", b"\x89PNG fake", "image/png")},
    )

    assert response.status_code == 400
    assert _stored_files() == before
    assert (await test_db.execute(select(MenuItem))).scalars().all() == []


@pytest.mark.asyncio
async def test_create_menu_item_bad_video_stores_no_image(owner_client: AsyncClient):
    before = _stored_files()

    response = await owner_client.post(
        "/api/menus",
        data={"name": "Focaccia", "description": "Rosemary bread", "category": "Bread", "price": "4"},
        files={
            "image": ("focaccia.png", b"\x89PNG fake", "image/png"),
            "video": ("focaccia.txt", b"not a video", "text/plain"),
        },
    )

    assert response.status_code == 400
    assert _stored_files() == before


@pytest.mark.asyncio
async def test_update_menu_item_invalid_rating_stores_no_files(owner_client: AsyncClient, test_menu_items):
    pizza = test_menu_items[0]
    before = _stored_files()

    response = await owner_client.put(
        f"/api/menus/{pizza.id}",
        data={"rating": "9", "name": "Renamed"},
        files={"image": ("pizza.png", b"\x89PNG fake", "image/png")},
    )

    assert response.status_code == 400
    assert _stored_files() == before

    response = await owner_client.get(f"/api/menus/{pizza.restaurant_id}", params={"name": "margherita"})
    assert _names(response) == ["Margherita Pizza"]


@pytest.mark.asyncio
async def test_update_menu_item_blank_popularity_keeps_value(owner_client: AsyncClient, test_menu_items):
    pizza = test_menu_items[0]

    response = await owner_client.put(
        f"/api/menus/{pizza.id}",
        data={"popularity": "", "category": "Pizza Rossa"},
    )

    assert response.status_code == 200
    menu = response.json()["menu"]
    assert menu["popularity"] == "High"
    assert menu["category"] == "Pizza Rossa"


@pytest.mark.asyncio
async def test_toggle_availability(owner_client: AsyncClient, test_menu_items):
    salad = test_menu_items[2]

    response = await owner_client.put(
        f"/api/menus/{salad.id}/availability",
        json={"is_available": True},
    )

    assert response.status_code == 200
    assert response.json()["menu"]["is_available"] is True


@pytest.mark.asyncio
async def test_delete_menu_item(owner_client: AsyncClient, test_db, test_menu_items):
    pizza = test_menu_items[0]

    response = await owner_client.delete(f"/api/menus/{pizza.id}")

    assert response.status_code == 200
    assert response.json()["menu"]["id"] == str(pizza.id)
    remaining = (await test_db.execute(select(MenuItem))).scalars().all()
    assert len(remaining) == 2
