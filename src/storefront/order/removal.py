"""Order removal — command and handler.

Deleting an order also deletes its cart items, so no item is left pointing at
a missing order.
"""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.cart.cart_item import CartItem
from storefront.domain import logger, storefront
from storefront.order.order import Order


@storefront.command(part_of="Order")
class DeleteOrder:
    order_id = Identifier(required=True)


@storefront.command_handler(part_of=Order)
class DeleteOrderHandler:
    @handle(DeleteOrder)
    def delete_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(str(command.order_id))

        cart_repo = current_domain.repository_for(CartItem)
        cart_items = cart_repo.for_order(order.order_id)
        for cart_item in cart_items:
            cart_repo._dao.delete(cart_item)

        repo._dao.delete(order)

        logger.info("order_deleted", order_id=str(command.order_id), cart_items_deleted=len(cart_items))
