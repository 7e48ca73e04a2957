"""Pydantic request/response schemas for the Catalogue API.

Money is exchanged as strings ("25.00") so no precision is lost on the way.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

# --- Bakery ---


class UpsertBakeryRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Sweet Treats",
                    "description": "Small-batch celebration cakes.",
                    "address": "4 Mill Lane, Springfield",
                    "phone": "+1-555-0100",
                    "image_url": "https://cdn.example.com/bakeries/sweet-treats.jpg",
                }
            ]
        }
    }

    bakery_id: str | None = None
    name: str | None = Field(None, max_length=255)
    description: str | None = None
    address: str | None = None
    phone: str | None = Field(None, max_length=20)
    image_url: str | None = Field(None, max_length=500)


class BakeryResponse(BaseModel):
    id: str
    seller_id: str
    name: str
    description: str | None = None
    address: str | None = None
    phone: str | None = None
    image_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class BakerySummary(BaseModel):
    id: str
    name: str
    address: str | None = None


# --- Cakes ---


class AddCakeRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Chocolate Cake",
                    "description": "Three layers of dark chocolate sponge.",
                    "price": "25.00",
                    "category": "Birthday",
                    "allergens": "gluten, dairy, eggs",
                    "image_url": "https://cdn.example.com/cakes/chocolate.jpg",
                    "available": True,
                    "preparation_time_hours": 24,
                }
            ]
        }
    }

    name: str | None = Field(None, max_length=255)
    description: str | None = None
    price: str | int | float | None = None
    category: str | None = Field(None, max_length=100)
    allergens: str | list[str] | None = None
    image_url: str | None = Field(None, max_length=500)
    available: bool = True
    preparation_time_hours: int | None = None


class UpdateCakeRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "price": "27.50",
                    "allergens": "gluten, dairy",
                }
            ]
        }
    }

    name: str | None = Field(None, max_length=255)
    description: str | None = None
    price: str | int | float | None = None
    category: str | None = Field(None, max_length=100)
    allergens: str | list[str] | None = None
    image_url: str | None = Field(None, max_length=500)
    preparation_time_hours: int | None = None


class SetAvailabilityRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"available": False}]}}

    available: bool


class CakeResponse(BaseModel):
    id: str
    bakery_id: str
    name: str
    description: str | None = None
    price: str
    category: str | None = None
    allergens: list[str] = []
    image_url: str | None = None
    available: bool
    preparation_time_hours: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CakeListingResponse(CakeResponse):
    bakery: BakerySummary


class CakeIdResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"cake_id": "b2c3d4e5-f6a7-8901-bcde-f12345678901"}]}}

    cake_id: str


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"
