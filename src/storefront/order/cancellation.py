"""Order cancellation — command and handler.

Exposed as the order "update": the only change an owner can make to an order
is to cancel it while it is still pending. A requested ``status`` is validated
but otherwise ignored.
"""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import logger, storefront
from storefront.order.order import Order, OrderStatus
from storefront.shared.rejection import reject
from storefront.user.user import User


@storefront.command(part_of="Order")
class CancelOrder:
    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    status = String(max_length=20, choices=OrderStatus)


@storefront.command_handler(part_of=Order)
class CancelOrderHandler:
    @handle(CancelOrder)
    def cancel_order(self, command):
        context = {"order_id": str(command.order_id), "user_id": str(command.user_id)}

        if not current_domain.repository_for(User).exists(command.user_id):
            reject("cancel_order", "user_id", "Cannot update order. User does not exist.", **context)

        repo = current_domain.repository_for(Order)
        order = repo.find_for_user(command.order_id, command.user_id)
        if order is None:
            reject("cancel_order", "order_id", "Cannot update order. Order does not exist for this user.", **context)

        order.cancel()
        repo.add(order)

        logger.info("order_cancelled", **context)
