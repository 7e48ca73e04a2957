"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the domain's validation rules
and match the field names of the API's Pydantic request schemas.
"""

import random
import uuid
from datetime import UTC, datetime, timedelta

from faker import Faker

fake = Faker()

CATEGORIES = ["Birthday", "Wedding", "Cupcakes", "Cheesecake", "Vegan", "Seasonal"]
ALLERGENS = ["gluten", "dairy", "eggs", "nuts", "soy", "sesame"]
FLAVOURS = ["Chocolate", "Lemon", "Red Velvet", "Carrot", "Vanilla", "Coffee", "Raspberry", "Matcha"]
SHAPES = ["Cake", "Gateau", "Layer Cake", "Sponge", "Torte"]


def principal_id(prefix: str = "lt") -> str:
    """Unique upstream principal ids like 'auth|lt-a1b2c3d4'."""
    return f"auth|{prefix}-{uuid.uuid4().hex[:8]}"


def valid_email() -> str:
    local = fake.user_name()[:20]
    domain = fake.free_email_domain()
    return f"{local}.{uuid.uuid4().hex[:4]}@{domain}"


def valid_phone() -> str:
    area = random.randint(200, 999)
    prefix = random.randint(200, 999)
    line = random.randint(1000, 9999)
    return f"+1-{area}-{prefix}-{line}"


def profile_data(role: str = "customer") -> dict:
    """ProvisionProfileRequest payload."""
    return {
        "email": valid_email(),
        "display_name": fake.name()[:255],
        "role": role,
    }


def bakery_data() -> dict:
    """UpsertBakeryRequest payload."""
    return {
        "name": f"{fake.last_name()}'s {random.choice(['Bakery', 'Patisserie', 'Cake Shop'])}",
        "description": fake.sentence(nb_words=10),
        "address": fake.address().replace("\n", ", ")[:255],
        "phone": valid_phone(),
        "image_url": f"https://cdn.example.com/bakeries/{uuid.uuid4().hex[:12]}.jpg",
    }


def cake_price() -> str:
    """Two-decimal price between 8.00 and 150.00."""
    return f"{random.randint(800, 15000) / 100:.2f}"


def cake_data() -> dict:
    """AddCakeRequest payload."""
    return {
        "name": f"{random.choice(FLAVOURS)} {random.choice(SHAPES)}",
        "description": fake.sentence(nb_words=12),
        "price": cake_price(),
        "category": random.choice(CATEGORIES),
        "allergens": ", ".join(random.sample(ALLERGENS, k=random.randint(0, 3))),
        "image_url": f"https://cdn.example.com/cakes/{uuid.uuid4().hex[:12]}.jpg",
        "available": True,
        "preparation_time_hours": random.choice([0, 12, 24, 48, 72]),
    }


def order_data(cake_id: str) -> dict:
    """PlaceOrderRequest payload. A third of orders are deliveries."""
    delivery = random.random() < 0.33
    preferred = datetime.now(UTC) + timedelta(days=random.randint(1, 14), hours=random.randint(0, 8))
    return {
        "cake_id": cake_id,
        "quantity": random.randint(1, 4),
        "delivery_type": "delivery" if delivery else "pickup",
        "delivery_address": fake.address().replace("\n", ", ") if delivery else None,
        "preferred_time": preferred.isoformat(),
        "special_instructions": random.choice([None, f"Write 'Happy Birthday {fake.first_name()}'"]),
    }
