"""Cart item management — commands and handler.

Adding the first item for a user opens their pending order as a side effect,
in the same unit of work as the item insert.
"""

from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.cart.cart_item import CartItem
from storefront.domain import logger, storefront
from storefront.order.order import Order
from storefront.shared.rejection import reject
from storefront.user.user import User


@storefront.command(part_of="CartItem")
class AddCartItem:
    cart_item_id = Identifier(required=True)
    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    item = String(required=True, max_length=255)
    price = Integer(required=True, min_value=1)


@storefront.command(part_of="CartItem")
class UpdateCartItem:
    cart_item_id = Identifier(required=True)
    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    item = String(required=True, max_length=255)
    price = Integer(required=True, min_value=1)


@storefront.command(part_of="CartItem")
class DeleteCartItem:
    cart_item_id = Identifier(required=True)


@storefront.command_handler(part_of=CartItem)
class ManageCartItemsHandler:
    @handle(AddCartItem)
    def add_cart_item(self, command):
        context = {"cart_item_id": str(command.cart_item_id), "order_id": str(command.order_id)}

        if not current_domain.repository_for(User).exists(command.user_id):
            reject("add_cart_item", "user_id", "Cannot add cart item. User is not found.", **context)

        order_repo = current_domain.repository_for(Order)
        order = order_repo.find(command.order_id)
        if order is None:
            if order_repo.pending_for_user(command.user_id) is not None:
                reject("add_cart_item", "order_id", "Cannot add cart item. User already has a pending order.", **context)
            order = Order.place(order_id=command.order_id, user_id=command.user_id)
            order_repo.add(order)
            logger.info("order_placed", order_id=str(order.order_id), user_id=str(order.user_id))
        elif not order.is_pending:
            reject(
                "add_cart_item",
                "order_id",
                "Cannot add cart item to the order. Order is already processed or cancelled.",
                **context,
            )
        elif not order.belongs_to(command.user_id):
            reject("add_cart_item", "order_id", "Cannot add cart item. Order belongs to another user.", **context)

        repo = current_domain.repository_for(CartItem)
        if repo.find(command.cart_item_id) is not None:
            reject("add_cart_item", "cart_item_id", "Cannot add cart item. Cart item already exists.", **context)

        cart_item = CartItem.add(
            cart_item_id=command.cart_item_id,
            order=order,
            item=command.item,
            price=command.price,
        )
        repo.add(cart_item)

        logger.info("cart_item_added", **context)
        return str(cart_item.cart_item_id)

    @handle(UpdateCartItem)
    def update_cart_item(self, command):
        context = {"cart_item_id": str(command.cart_item_id), "order_id": str(command.order_id)}

        if not current_domain.repository_for(User).exists(command.user_id):
            reject("update_cart_item", "user_id", "Cannot update cart item. User is not found.", **context)

        order = current_domain.repository_for(Order).find_for_user(command.order_id, command.user_id)
        if order is None:
            reject("update_cart_item", "order_id", "Cannot update cart item. Order is not found for user.", **context)

        repo = current_domain.repository_for(CartItem)
        cart_item = repo.find(command.cart_item_id)
        if cart_item is None or str(cart_item.order_id) != str(order.order_id):
            reject(
                "update_cart_item",
                "cart_item_id",
                "Cannot update cart item. Cart item is not found for user.",
                **context,
            )

        if not order.is_pending:
            reject(
                "update_cart_item",
                "order_id",
                "Cannot update cart item. Order is already processed or cancelled.",
                **context,
            )

        cart_item.revise(item=command.item, price=command.price)
        repo.add(cart_item)

        logger.info("cart_item_updated", **context)

    @handle(DeleteCartItem)
    def delete_cart_item(self, command):
        repo = current_domain.repository_for(CartItem)
        cart_item = repo.get(str(command.cart_item_id))
        repo._dao.delete(cart_item)

        logger.info("cart_item_deleted", cart_item_id=str(command.cart_item_id))
