#!/usr/bin/env python3
"""
Seed script to create plans, an admin account and a demo restaurant
"""

import asyncio
import uuid

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

PLANS = [
    {"plan_name": "Basic", "price_cents": 0, "description": "Digital menu and QR ordering"},
    {"plan_name": "Pro", "price_cents": 2900, "description": "Adds analytics and kitchen assignment"},
    {"plan_name": "Premium", "price_cents": 7900, "description": "Adds video menus and priority support"},
]

PLAN_FEATURES = {
    "Basic": ["QR menu", "Table ordering", "Order history"],
    "Pro": ["QR menu", "Table ordering", "Order history", "Analytics dashboard", "Kitchen assignment"],
    "Premium": [
        "QR menu",
        "Table ordering",
        "Order history",
        "Analytics dashboard",
        "Kitchen assignment",
        "Menu videos",
        "Priority support",
    ],
}


async def seed_demo_data():
    """Seed demo data for development"""
    from sqlalchemy import select

    from app.database import SessionLocal, init_db
    from app.models.billing import Subscription, PlanFeature
    from app.models.menu import MenuItem
    from app.models.restaurant import Restaurant, Plan
    from app.models.user import User, UserRole

    # Create tables
    await init_db()

    async with SessionLocal() as db:
        # Check if demo owner already exists
        result = await db.execute(
            select(User).where(User.email == "mario@marios-kitchen.com")
        )
        existing = result.scalar_one_or_none()

        if existing:
            print("Demo data already exists. Skipping...")
            return

        print("Creating plans...")

        for plan in PLANS:
            db.add(Subscription(**plan))
            for feature in PLAN_FEATURES[plan["plan_name"]]:
                db.add(PlanFeature(plan_name=plan["plan_name"], feature=feature))

        # Create platform admin
        admin_user = User(
            id=uuid.uuid4(),
            name="System Admin",
            email="admin@tablo.app",
            hashed_password=pwd_context.hash("admin123"),
            role=UserRole.ADMIN,
            is_active=True,
        )
        db.add(admin_user)

        # Create restaurant owner
        owner = User(
            id=uuid.uuid4(),
            name="Mario Rossi",
            email="mario@marios-kitchen.com",
            hashed_password=pwd_context.hash("mario123"),
            role=UserRole.OWNER,
            is_active=True,
        )
        db.add(owner)
        await db.flush()

        restaurant = Restaurant(
            id=uuid.uuid4(),
            owner_id=owner.id,
            name="Mario's Italian Kitchen",
            plan=Plan.PRO.value,
            address="123 Main Street, New York",
            phone="+15551234567",
            opening_hours="11:00",
            closing_hours="22:00",
            description="Family-run trattoria",
            region="US-East",
        )
        db.add(restaurant)
        await db.flush()

        print(f"Created restaurant: {restaurant.name} (ID: {restaurant.id})")
        print("Creating menu items...")

        menu_items = [
            # Appetizers
            {"name": "Bruschetta", "description": "Grilled bread with tomatoes, garlic and basil", "price_cents": 899, "category": "Appetizers", "dish_tags": ["vegan"], "popularity": "High", "rating": 4.6},
            {"name": "Calamari Fritti", "description": "Crispy fried calamari with marinara sauce", "price_cents": 1299, "category": "Appetizers", "dish_tags": [], "popularity": "Medium", "rating": 4.2},
            {"name": "Garlic Bread", "description": "Toasted bread with garlic butter and herbs", "price_cents": 599, "category": "Appetizers", "dish_tags": ["vegetarian"], "popularity": "Medium", "rating": 4.0},

            # Pizzas
            {"name": "Margherita Pizza", "description": "Fresh mozzarella, tomato sauce and basil", "price_cents": 1499, "category": "Pizza", "dish_tags": ["vegetarian"], "popularity": "High", "rating": 4.8},
            {"name": "Diavola Pizza", "description": "Spicy salami, chili and mozzarella", "price_cents": 1699, "category": "Pizza", "dish_tags": ["spicy"], "popularity": "High", "rating": 4.5},

            # Pasta
            {"name": "Spaghetti Bolognese", "description": "Spaghetti with rich meat sauce", "price_cents": 1599, "category": "Pasta", "dish_tags": [], "popularity": "Medium", "rating": 4.3},
            {"name": "Penne Arrabbiata", "description": "Penne in a spicy tomato sauce", "price_cents": 1399, "category": "Pasta", "dish_tags": ["spicy", "vegan"], "popularity": "Low", "rating": 3.9},

            # Desserts
            {"name": "Tiramisu", "description": "Classic Italian coffee-flavored dessert", "price_cents": 899, "category": "Desserts", "dish_tags": [], "popularity": "High", "rating": 4.9},

            # Drinks
            {"name": "Espresso", "description": "Single or double shot", "price_cents": 349, "category": "Drinks", "dish_tags": [], "popularity": "Medium", "rating": None},
        ]

        for item_data in menu_items:
            db.add(
                MenuItem(
                    restaurant_id=restaurant.id,
                    is_available=True,
                    availability_schedule="Mon-Sun, 11:00-22:00",
                    **item_data,
                )
            )

        await db.commit()

        print(f"""
Demo data created successfully!

Restaurant: {restaurant.name}
  ID: {restaurant.id}
  Plan: {restaurant.plan}

Users:
  Admin:
    Email: admin@tablo.app
    Password: admin123

  Owner:
    Email: mario@marios-kitchen.com
    Password: mario123

Menu: {len(menu_items)} items created
Plans: {", ".join(plan["plan_name"] for plan in PLANS)}
""")


if __name__ == "__main__":
    asyncio.run(seed_demo_data())
