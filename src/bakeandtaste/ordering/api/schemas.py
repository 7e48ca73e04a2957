"""Pydantic request/response schemas for the Ordering API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "cake_id": "b2c3d4e5-f6a7-8901-bcde-f12345678901",
                    "quantity": 2,
                    "delivery_type": "delivery",
                    "delivery_address": "12 Baker Street, Springfield",
                    "preferred_time": "2026-06-01T15:00:00Z",
                    "special_instructions": "Happy Birthday Sam in blue icing",
                }
            ]
        }
    }

    cake_id: str
    quantity: int | None = None
    delivery_type: str | None = Field(None, max_length=20)
    delivery_address: str | None = None
    preferred_time: datetime | None = None
    special_instructions: str | None = None


class UpdateOrderStatusRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "confirmed"}]}}

    status: str = Field(..., max_length=20)


class OrderResponse(BaseModel):
    id: str
    customer_id: str
    cake_id: str
    bakery_id: str
    quantity: int
    total_amount: str
    delivery_type: str
    delivery_address: str | None = None
    preferred_time: datetime | None = None
    special_instructions: str | None = None
    status: str
    payment_status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CakeSummary(BaseModel):
    name: str
    price: str


class BakerySummary(BaseModel):
    name: str
    address: str | None = None


class CustomerSummary(BaseModel):
    display_name: str | None = None
    email: str | None = None
    phone: str | None = None


class CustomerOrderResponse(OrderResponse):
    cake: CakeSummary
    bakery: BakerySummary


class BakeryOrderResponse(OrderResponse):
    cake: CakeSummary
    customer: CustomerSummary


class DashboardResponse(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "bakery_id": "c3d4e5f6-a7b8-9012-cdef-123456789012",
                    "total_cakes": 8,
                    "total_orders": 42,
                    "pending_orders": 3,
                    "total_revenue": "1260.00",
                }
            ]
        }
    }

    bakery_id: str
    total_cakes: int
    total_orders: int
    pending_orders: int
    total_revenue: str
