"""User registration — command and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import logger, storefront
from storefront.shared.rejection import reject
from storefront.user.user import User


@storefront.command(part_of="User")
class AddUser:
    """Create a user with a caller-chosen identifier."""

    user_id = Identifier(required=True)
    name = String(required=True, max_length=255)


@storefront.command_handler(part_of=User)
class AddUserHandler:
    @handle(AddUser)
    def add_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.exists(command.user_id):
            reject("add_user", "user_id", "Cannot add user. User already exists.", user_id=str(command.user_id))

        user = User.add(user_id=command.user_id, name=command.name)
        repo.add(user)

        logger.info("user_added", user_id=str(user.user_id))
        return str(user.user_id)
