"""Domain events for the User aggregate."""

from protean.fields import Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="User")
class UserAdded:
    """A new user account was created."""

    __version__ = 1

    user_id = Identifier(required=True)
    name = String(required=True, max_length=255)
