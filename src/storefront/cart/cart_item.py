"""CartItem aggregate — one priced line in a user's pending order.

Cart items are stored on their own (not as children of Order) so they can be
addressed and deleted by identifier alone. The owning user is copied from the
order when the item is added, so ``cart_item.user_id == order.user_id`` holds
for every stored item.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.cart.events import CartItemAdded, CartItemUpdated
from storefront.domain import storefront
from storefront.order.order import Order


@storefront.aggregate
class CartItem:
    cart_item_id = Identifier(identifier=True, required=True)
    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    item = String(required=True, max_length=255)
    price = Integer(required=True, min_value=1)
    added_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def item_is_not_blank(self):
        if self.item is not None and not self.item.strip():
            raise ValidationError({"item": ["'Item' should not be empty."]})

    @classmethod
    def add(cls, cart_item_id, order, item, price):
        """Put a new item into ``order``, which must still be pending."""
        if not order.is_pending:
            raise ValidationError(
                {"order_id": ["Cannot add cart item to the order. Order is already processed or cancelled."]}
            )

        now = datetime.now(UTC)
        cart_item = cls(
            cart_item_id=cart_item_id,
            order_id=order.order_id,
            user_id=order.user_id,
            item=item,
            price=price,
            added_at=now,
            updated_at=now,
        )
        cart_item.raise_(
            CartItemAdded(
                cart_item_id=str(cart_item_id),
                order_id=str(order.order_id),
                user_id=str(order.user_id),
                item=item,
                price=price,
            )
        )
        return cart_item

    def revise(self, item, price):
        """Overwrite the label and price."""
        previous_price = self.price

        self.item = item
        self.price = price
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemUpdated(
                cart_item_id=str(self.cart_item_id),
                order_id=str(self.order_id),
                previous_price=previous_price,
                item=item,
                price=price,
            )
        )


@storefront.repository(part_of=CartItem)
class CartItemRepository:
    def find(self, cart_item_id) -> CartItem | None:
        try:
            return self.get(str(cart_item_id))
        except ObjectNotFoundError:
            return None

    def for_order(self, order_id) -> list[CartItem]:
        return self._dao.query.filter(order_id=str(order_id)).all().items

    def list_for_pending_order(self, user_id) -> list[CartItem]:
        """Items in the user's pending order (the "current cart")."""
        order = current_domain.repository_for(Order).pending_for_user(user_id)
        if order is None:
            raise ValidationError({"order": ["User does not have a pending order."]})
        return self.for_order(order.order_id)
