"""FastAPI routes for the Storefront domain — users, cart items, orders and checkout.

Thin adapters: request schema → command → ``current_domain.process``, and
aggregate → response schema. Reads go straight to the repositories. Every
router requires an authenticated caller; versioned mounting happens in
``storefront.api.mount``.
"""

from uuid import UUID

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from storefront.api.auth import authenticated_user
from storefront.api.schemas import (
    AddUserRequest,
    CartItemIdResponse,
    CartItemRequest,
    CartItemResponse,
    OrderRequest,
    OrderResponse,
    StatusResponse,
    UserIdResponse,
    UserResponse,
)
from storefront.cart.cart_item import CartItem
from storefront.cart.items import AddCartItem, DeleteCartItem, UpdateCartItem
from storefront.order.cancellation import CancelOrder
from storefront.order.checkout import CheckoutOrder
from storefront.order.order import Order
from storefront.order.removal import DeleteOrder
from storefront.user.registration import AddUser
from storefront.user.user import User
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def _cart_item_response(cart_item: CartItem) -> CartItemResponse:
    return CartItemResponse(
        cart_item_id=str(cart_item.cart_item_id),
        order_id=str(cart_item.order_id),
        user_id=str(cart_item.user_id),
        item=cart_item.item,
        price=cart_item.price,
    )


def _order_response(order: Order) -> OrderResponse:
    return OrderResponse(order_id=str(order.order_id), user_id=str(order.user_id), status=order.status)


# ---------------------------------------------------------------------------
# User Router
# ---------------------------------------------------------------------------
user_router = APIRouter(prefix="/users", tags=["users"], dependencies=[Depends(authenticated_user)])


@user_router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: UUID) -> UserResponse:
    user = current_domain.repository_for(User).get(str(user_id))
    logger.info("user_retrieved", requested_user_id=str(user_id))
    return UserResponse(user_id=str(user.user_id), name=user.name)


@user_router.post("", response_model=UserIdResponse)
async def add_user(body: AddUserRequest) -> UserIdResponse:
    command = AddUser(user_id=str(body.user_id), name=body.name)
    result = current_domain.process(command, asynchronous=False)
    return UserIdResponse(user_id=result)


# ---------------------------------------------------------------------------
# Cart Item Router
# ---------------------------------------------------------------------------
cart_item_router = APIRouter(prefix="/cart-items", tags=["cart-items"])


@cart_item_router.get("", response_model=list[CartItemResponse])
async def list_cart_items(caller_id: str = Depends(authenticated_user)) -> list[CartItemResponse]:
    """Items in the caller's pending order."""
    cart_items = current_domain.repository_for(CartItem).list_for_pending_order(caller_id)
    logger.info("cart_items_retrieved", count=len(cart_items))
    return [_cart_item_response(cart_item) for cart_item in cart_items]


@cart_item_router.post("", response_model=CartItemIdResponse, dependencies=[Depends(authenticated_user)])
async def add_cart_item(body: CartItemRequest) -> CartItemIdResponse:
    command = AddCartItem(
        cart_item_id=str(body.cart_item_id),
        order_id=str(body.order_id),
        user_id=str(body.user_id),
        item=body.item,
        price=body.price,
    )
    result = current_domain.process(command, asynchronous=False)
    return CartItemIdResponse(cart_item_id=result, order_id=str(body.order_id))


@cart_item_router.put("", response_model=StatusResponse, dependencies=[Depends(authenticated_user)])
async def update_cart_item(body: CartItemRequest) -> StatusResponse:
    command = UpdateCartItem(
        cart_item_id=str(body.cart_item_id),
        order_id=str(body.order_id),
        user_id=str(body.user_id),
        item=body.item,
        price=body.price,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_item_router.delete("/{cart_item_id}", response_model=StatusResponse, dependencies=[Depends(authenticated_user)])
async def delete_cart_item(cart_item_id: UUID) -> StatusResponse:
    command = DeleteCartItem(cart_item_id=str(cart_item_id))
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.get("", response_model=list[OrderResponse])
async def list_orders(caller_id: str = Depends(authenticated_user)) -> list[OrderResponse]:
    """All of the caller's orders, whatever their status."""
    orders = current_domain.repository_for(Order).list_by_user(caller_id)
    logger.info("orders_retrieved", count=len(orders))
    return [_order_response(order) for order in orders]


@order_router.get("/{order_id}", response_model=OrderResponse, dependencies=[Depends(authenticated_user)])
async def get_order(order_id: UUID) -> OrderResponse:
    order = current_domain.repository_for(Order).get(str(order_id))
    return _order_response(order)


@order_router.put("", response_model=StatusResponse, dependencies=[Depends(authenticated_user)])
async def cancel_order(body: OrderRequest) -> StatusResponse:
    command = CancelOrder(order_id=str(body.order_id), user_id=str(body.user_id), status=body.status)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@order_router.delete("/{order_id}", response_model=StatusResponse, dependencies=[Depends(authenticated_user)])
async def delete_order(order_id: UUID) -> StatusResponse:
    command = DeleteOrder(order_id=str(order_id))
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Checkout Router
# ---------------------------------------------------------------------------
checkout_router = APIRouter(prefix="/checkout", tags=["checkout"], dependencies=[Depends(authenticated_user)])


@checkout_router.post("", response_model=StatusResponse)
async def checkout_order(body: OrderRequest) -> StatusResponse:
    command = CheckoutOrder(order_id=str(body.order_id), user_id=str(body.user_id), status=body.status)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()
