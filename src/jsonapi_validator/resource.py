"""Validation of resource create/update request payloads."""

import logging
from typing import Any

from . import messages
from .document import ensure, validate_primary_resource
from .json_types import is_object

logger = logging.getLogger(__name__)

PAYLOAD_KEYS = frozenset({"data"})


def validate_resource_payload(document: Any) -> None:
    """Validate the body of a resource create or update request.

    The body must hold exactly one member, ``data``, whose value is a single
    resource object. The resource may omit ``id``.

    Args:
        document: Decoded JSON value of the request body

    Raises:
        InvalidDocument: On the first structural violation found
    """
    logger.debug("Validating resource payload")

    ensure(is_object(document), messages.PAYLOAD_ROOT_NOT_OBJECT)
    ensure(frozenset(document.keys()) == PAYLOAD_KEYS and is_object(document["data"]),
           messages.RESOURCE_PAYLOAD_SHAPE)
    validate_primary_resource(document["data"])
