"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Identifier, Integer

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A pending order was opened for a user by their first cart item."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    placed_at = DateTime(required=True)


@storefront.event(part_of="Order")
class OrderProcessed:
    """A pending order was checked out."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    item_count = Integer(required=True)
    processed_at = DateTime(required=True)


@storefront.event(part_of="Order")
class OrderCancelled:
    """A pending order was cancelled by its owner."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    cancelled_at = DateTime(required=True)
