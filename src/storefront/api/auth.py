"""Request-scoped dependencies: caller identity and API version.

The caller is identified by a trusted ``x-user-id`` header holding a user's
UUID. A missing or malformed header, or one naming no user, is a 401.
"""

from uuid import UUID

from fastapi import Header, HTTPException
from protean.utils.globals import current_domain

from storefront.user.user import User
from storefront.utils.logging import add_context

SUPPORTED_API_VERSIONS = ("1", "2")


async def authenticated_user(x_user_id: str = Header(default="")) -> str:
    """Resolve the caller's user id from the ``x-user-id`` header."""
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Missing x-user-id header")

    try:
        user_id = str(UUID(x_user_id))
    except ValueError:
        raise HTTPException(status_code=401, detail="Invalid x-user-id header") from None

    if not current_domain.repository_for(User).exists(user_id):
        raise HTTPException(status_code=401, detail="Invalid x-user-id header. User is not found")

    add_context(user_id=user_id)
    return user_id


async def api_version(version: str) -> str:
    if version not in SUPPORTED_API_VERSIONS:
        raise HTTPException(status_code=404, detail=f"API version v{version} is not supported")

    add_context(api_version=f"v{version}")
    return version
