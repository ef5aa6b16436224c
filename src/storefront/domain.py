"""Storefront bounded context — users, their orders, and the cart items that fill them.

Orders are created implicitly by the first cart item a user adds, stay
Pending while the cart is being filled, and end either Processed (checkout)
or Cancelled.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

storefront = Domain(name="storefront")
