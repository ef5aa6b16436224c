"""Shared fixtures for the Storefront tests."""

from uuid import uuid4

import pytest
from protean import current_domain
from storefront.user.registration import AddUser


def _register(name):
    return current_domain.process(AddUser(user_id=str(uuid4()), name=name), asynchronous=False)


@pytest.fixture()
def user_id():
    """A registered user."""
    return _register("Ada Lovelace")


@pytest.fixture()
def other_user_id():
    """A second registered user, for ownership checks."""
    return _register("Grace Hopper")
