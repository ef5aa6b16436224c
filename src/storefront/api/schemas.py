"""Pydantic request/response schemas for the Storefront API.

These are external contracts (the DTOs) — separate from the protean commands
and aggregates they are mapped to. Shape checks (UUIDs, blank labels) live
here; business rules (positive prices, valid statuses) live on the commands,
and the aggregates reject blank labels again for callers that bypass HTTP.
"""

from typing import Annotated
from uuid import UUID

from pydantic import AfterValidator, BaseModel, StringConstraints


def _not_nil(value: UUID) -> UUID:
    if value.int == 0:
        raise ValueError("should not be empty")
    return value


RequiredUUID = Annotated[UUID, AfterValidator(_not_nil)]
RequiredLabel = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class AddUserRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"user_id": "3f0f4b8e-7d1c-4f7a-9a55-0b8e2f1c6d21", "name": "Ada Lovelace"}]
        }
    }

    user_id: RequiredUUID
    name: RequiredLabel


class CartItemRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "cart_item_id": "9b2d7c4e-1a3f-4e5b-8c6d-7e8f9a0b1c2d",
                    "order_id": "5c1e2d3f-4a5b-4c6d-8e7f-9a0b1c2d3e4f",
                    "user_id": "3f0f4b8e-7d1c-4f7a-9a55-0b8e2f1c6d21",
                    "item": "Book",
                    "price": 20,
                }
            ]
        }
    }

    cart_item_id: RequiredUUID
    order_id: RequiredUUID
    user_id: RequiredUUID
    item: RequiredLabel
    price: int


class OrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "order_id": "5c1e2d3f-4a5b-4c6d-8e7f-9a0b1c2d3e4f",
                    "user_id": "3f0f4b8e-7d1c-4f7a-9a55-0b8e2f1c6d21",
                    "status": "Pending",
                }
            ]
        }
    }

    order_id: RequiredUUID
    user_id: RequiredUUID
    status: str | None = None


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class UserResponse(BaseModel):
    user_id: str
    name: str


class UserIdResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"user_id": "3f0f4b8e-7d1c-4f7a-9a55-0b8e2f1c6d21"}]}}

    user_id: str


class CartItemResponse(BaseModel):
    cart_item_id: str
    order_id: str
    user_id: str
    item: str
    price: int


class CartItemIdResponse(BaseModel):
    cart_item_id: str
    order_id: str


class OrderResponse(BaseModel):
    order_id: str
    user_id: str
    status: str


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"
