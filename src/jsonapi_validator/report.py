"""Non-raising front end over the three validators.

HTTP handlers and batch tools often want the outcome as a value rather
than an exception; ``check`` runs the right validator for a payload kind
and returns a ``ValidationReport``.
"""

import logging
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, model_validator

from .document import validate_document
from .exceptions import InvalidDocument
from .relationship import validate_relationship_payload
from .resource import validate_resource_payload

logger = logging.getLogger(__name__)


class PayloadKind(str, Enum):
    """Kinds of JSON:API payload the validators understand."""
    DOCUMENT = "document"
    RESOURCE = "resource"
    RELATIONSHIP = "relationship"


_VALIDATORS: dict[PayloadKind, Callable[[Any], None]] = {
    PayloadKind.DOCUMENT: validate_document,
    PayloadKind.RESOURCE: validate_resource_payload,
    PayloadKind.RELATIONSHIP: validate_relationship_payload,
}


class ValidationReport(BaseModel):
    """Outcome of validating one payload."""
    kind: PayloadKind
    valid: bool
    message: str | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_message(self):
        """A rejected payload carries its message, an accepted one none."""
        if not self.valid and not self.message:
            raise ValueError("an invalid report requires a non-empty message")
        if self.valid and self.message is not None:
            raise ValueError("a valid report must not carry a message")
        return self

    def raise_for_status(self) -> None:
        """Raise InvalidDocument if the payload was rejected."""
        if not self.valid:
            raise InvalidDocument(self.message)


def validate(value: Any, kind: PayloadKind | str = PayloadKind.DOCUMENT) -> None:
    """Validate ``value`` with the validator matching ``kind``.

    Args:
        value: Decoded JSON value
        kind: Payload kind, as a PayloadKind or its string value

    Raises:
        InvalidDocument: On the first structural violation found
        ValueError: If ``kind`` is not a known payload kind
    """
    _VALIDATORS[PayloadKind(kind)](value)


def check(value: Any, kind: PayloadKind | str = PayloadKind.DOCUMENT) -> ValidationReport:
    """Validate ``value`` and report the outcome instead of raising.

    Args:
        value: Decoded JSON value
        kind: Payload kind, as a PayloadKind or its string value

    Returns:
        ValidationReport carrying the failure message when invalid
    """
    kind = PayloadKind(kind)
    try:
        _VALIDATORS[kind](value)
    except InvalidDocument as e:
        logger.debug(f"{kind.value} payload rejected: {e.message}")
        return ValidationReport(kind=kind, valid=False, message=e.message)
    return ValidationReport(kind=kind, valid=True)
