"""Rejecting a use case: log the broken rule, then raise it as a ValidationError."""

from typing import NoReturn

from protean.exceptions import ValidationError

from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def reject(use_case: str, field: str, message: str, **context) -> NoReturn:
    logger.warning(f"{use_case}_rejected", field=field, reason=message, **context)
    raise ValidationError({field: [message]})
