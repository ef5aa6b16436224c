"""Checkout — command and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.cart.cart_item import CartItem
from storefront.domain import logger, storefront
from storefront.order.order import Order, OrderStatus
from storefront.shared.rejection import reject
from storefront.user.user import User


@storefront.command(part_of="Order")
class CheckoutOrder:
    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    status = String(max_length=20, choices=OrderStatus)


@storefront.command_handler(part_of=Order)
class CheckoutOrderHandler:
    @handle(CheckoutOrder)
    def checkout_order(self, command):
        context = {"order_id": str(command.order_id), "user_id": str(command.user_id)}

        if not current_domain.repository_for(User).exists(command.user_id):
            reject("checkout_order", "user_id", "Cannot checkout order. User does not exist.", **context)

        repo = current_domain.repository_for(Order)
        order = repo.find_for_user(command.order_id, command.user_id)
        if order is None:
            reject("checkout_order", "order_id", "Cannot checkout order. Order does not exist for this user.", **context)

        cart_items = current_domain.repository_for(CartItem).for_order(order.order_id)
        order.checkout(item_count=len(cart_items))
        repo.add(order)

        logger.info("order_processed", item_count=len(cart_items), **context)
