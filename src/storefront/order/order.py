"""Order aggregate — the container a user's cart items are collected in.

State Machine:
    PENDING → PROCESSED  (checkout, needs at least one cart item)
    PENDING → CANCELLED  (update/cancel)

Processed and Cancelled are terminal. A user holds at most one Pending order;
that rule spans orders, so it is enforced by the cart item handler through
``OrderRepository.pending_for_user`` rather than by the aggregate.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, Identifier, String

from storefront.domain import storefront
from storefront.order.events import OrderCancelled, OrderPlaced, OrderProcessed


class OrderStatus(Enum):
    PENDING = "Pending"
    PROCESSED = "Processed"
    CANCELLED = "Cancelled"


@storefront.aggregate
class Order:
    order_id = Identifier(identifier=True, required=True)
    user_id = Identifier(required=True)
    status = String(max_length=20, choices=OrderStatus, default=OrderStatus.PENDING.value)
    created_at = DateTime()
    updated_at = DateTime()

    @property
    def is_pending(self) -> bool:
        return OrderStatus(self.status) == OrderStatus.PENDING

    def belongs_to(self, user_id) -> bool:
        return str(self.user_id) == str(user_id)

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, order_id, user_id):
        """Open a pending order for a user."""
        now = datetime.now(UTC)
        order = cls(
            order_id=order_id,
            user_id=user_id,
            status=OrderStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )
        order.raise_(OrderPlaced(order_id=str(order_id), user_id=str(user_id), placed_at=now))
        return order

    # -------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------
    def checkout(self, item_count):
        """Process the order. ``item_count`` is the number of cart items it owns."""
        if not self.is_pending:
            raise ValidationError({"status": ["Cannot checkout order. Order is already either processed or cancelled."]})
        if item_count < 1:
            raise ValidationError({"cart_items": ["Cannot checkout order. Order has no cart items."]})

        now = datetime.now(UTC)
        self.status = OrderStatus.PROCESSED.value
        self.updated_at = now

        self.raise_(
            OrderProcessed(
                order_id=str(self.order_id),
                user_id=str(self.user_id),
                item_count=item_count,
                processed_at=now,
            )
        )

    def cancel(self):
        if not self.is_pending:
            raise ValidationError({"status": ["Cannot update order. Order is already processed or cancelled."]})

        now = datetime.now(UTC)
        self.status = OrderStatus.CANCELLED.value
        self.updated_at = now

        self.raise_(OrderCancelled(order_id=str(self.order_id), user_id=str(self.user_id), cancelled_at=now))


@storefront.repository(part_of=Order)
class OrderRepository:
    def find(self, order_id) -> Order | None:
        try:
            return self.get(str(order_id))
        except ObjectNotFoundError:
            return None

    def find_for_user(self, order_id, user_id) -> Order | None:
        """The order, if it exists and is owned by ``user_id``."""
        order = self.find(order_id)
        if order is None or not order.belongs_to(user_id):
            return None
        return order

    def for_user(self, user_id) -> list[Order]:
        return self._dao.query.filter(user_id=str(user_id)).all().items

    def list_by_user(self, user_id) -> list[Order]:
        orders = self.for_user(user_id)
        if not orders:
            raise ObjectNotFoundError({"order": ["User does not have any order."]})
        return orders

    def pending_for_user(self, user_id) -> Order | None:
        pending = self._dao.query.filter(user_id=str(user_id), status=OrderStatus.PENDING.value).all().items
        return pending[0] if pending else None
