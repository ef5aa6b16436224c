"""User aggregate — the account a caller authenticates as.

Users are created once and never modified or deleted through the API.
"""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Identifier, String

from storefront.domain import storefront
from storefront.user.events import UserAdded


@storefront.aggregate
class User:
    user_id = Identifier(identifier=True, required=True)
    name = String(required=True, max_length=255)

    @invariant.post
    def name_is_not_blank(self):
        if self.name is not None and not self.name.strip():
            raise ValidationError({"name": ["'Name' should not be empty."]})

    @classmethod
    def add(cls, user_id, name):
        user = cls(user_id=user_id, name=name)
        user.raise_(UserAdded(user_id=str(user_id), name=name))
        return user


@storefront.repository(part_of=User)
class UserRepository:
    def exists(self, user_id) -> bool:
        return bool(self._dao.query.filter(user_id=str(user_id)).all().items)
