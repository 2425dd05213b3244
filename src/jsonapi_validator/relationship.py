"""Validation of relationship update request payloads."""

import logging
from typing import Any

from . import messages
from .document import ensure, validate_relationship_data
from .json_types import is_object

logger = logging.getLogger(__name__)

PAYLOAD_KEYS = frozenset({"data"})


def validate_relationship_payload(document: Any) -> None:
    """Validate the body of a relationship update request.

    The body must hold exactly one member, ``data``, containing resource
    linkage: null, a resource identifier or a list of identifiers.

    Args:
        document: Decoded JSON value of the request body

    Raises:
        InvalidDocument: On the first structural violation found
    """
    logger.debug("Validating relationship payload")

    ensure(is_object(document), messages.PAYLOAD_ROOT_NOT_OBJECT)
    ensure(frozenset(document.keys()) == PAYLOAD_KEYS,
           messages.RELATIONSHIP_PAYLOAD_SHAPE)
    validate_relationship_data(document["data"])
