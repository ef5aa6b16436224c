"""Domain events for the CartItem aggregate."""

from protean.fields import Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="CartItem")
class CartItemAdded:
    """An item was put into a user's pending order."""

    __version__ = 1

    cart_item_id = Identifier(required=True)
    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    item = String(required=True, max_length=255)
    price = Integer(required=True)


@storefront.event(part_of="CartItem")
class CartItemUpdated:
    """A cart item's label or price was overwritten."""

    __version__ = 1

    cart_item_id = Identifier(required=True)
    order_id = Identifier(required=True)
    previous_price = Integer(required=True)
    item = String(required=True, max_length=255)
    price = Integer(required=True)
