"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class ProvisionProfileRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "email": "maya@example.com",
                    "display_name": "Maya Patel",
                    "role": "customer",
                }
            ]
        }
    }

    email: str | None = Field(None, max_length=254)
    display_name: str | None = Field(None, max_length=255)
    role: str | None = Field(None, max_length=20)


class UpdateProfileRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "display_name": "Maya P.",
                    "phone": "+1-555-0142",
                    "address": "12 Baker Street, Springfield",
                }
            ]
        }
    }

    display_name: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=20)
    address: str | None = None


class ProfileIdResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"profile_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890"}]}}

    profile_id: str


class ProfileResponse(BaseModel):
    id: str
    principal_id: str
    role: str
    display_name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
