"""Structural validation of top-level JSON:API documents.

``validate_document`` is the entry point for responses and generic
documents. The substructure rules below it (resources, relationships,
resource identifiers, links, meta, the jsonapi object) are shared with the
request payload validators in ``resource`` and ``relationship``.

Every rule is fail-fast: the first violation raises ``InvalidDocument`` and
aborts the walk.
"""

import logging
from typing import Any

from . import messages
from .exceptions import InvalidDocument
from .json_types import JsonKind, is_array, is_object, is_string, kind_of

logger = logging.getLogger(__name__)

TOP_LEVEL_KEYS = frozenset({"data", "errors", "meta"})
RESOURCE_IDENTIFIER_KEYS = frozenset({"id", "type"})
RELATIONSHIP_LINK_KEYS = frozenset({"self", "related"})
JSONAPI_OBJECT_KEYS = frozenset({"version", "meta"})


def ensure(condition: bool, message: str) -> None:
    """Raise InvalidDocument with ``message`` unless ``condition`` holds."""
    if not condition:
        logger.debug(f"Rejected document: {message}")
        raise InvalidDocument(message)


def validate_document(document: Any) -> None:
    """Validate the structure of a JSON:API document.

    Args:
        document: Decoded JSON value of the whole document

    Raises:
        InvalidDocument: On the first structural violation found
    """
    logger.debug("Validating JSON:API document")

    ensure(is_object(document), messages.ROOT_NOT_OBJECT)
    ensure(not TOP_LEVEL_KEYS.isdisjoint(document.keys()),
           messages.MISSING_TOP_LEVEL_MEMBER)
    ensure(not ("data" in document and "errors" in document),
           messages.DATA_AND_ERRORS)
    ensure("data" in document or "included" not in document,
           messages.INCLUDED_WITHOUT_DATA)

    if "data" in document:
        validate_primary_data(document["data"])
    if "errors" in document:
        validate_errors(document["errors"])
    if "meta" in document:
        validate_meta(document["meta"])
    if "jsonapi" in document:
        validate_jsonapi(document["jsonapi"])
    if "included" in document:
        validate_included(document["included"])
    if "links" in document:
        validate_links(document["links"])


def validate_primary_data(data: Any) -> None:
    """Validate the top-level ``data`` member."""
    kind = kind_of(data)
    if kind is JsonKind.NULL:
        return
    elif kind is JsonKind.OBJECT:
        validate_primary_resource(data)
    elif kind is JsonKind.ARRAY:
        for resource in data:
            validate_resource(resource)
    else:
        ensure(False, messages.PRIMARY_DATA_KIND)


def validate_primary_resource(resource: Any) -> None:
    """Validate a resource object that may omit ``id``.

    Singular primary data and create payloads fall in this category, since
    the server may assign the id.
    """
    ensure(is_object(resource), messages.RESOURCE_NOT_OBJECT)
    ensure("type" in resource, messages.RESOURCE_MISSING_TYPE)
    if "attributes" in resource:
        validate_attributes(resource["attributes"])
    if "relationships" in resource:
        validate_relationships(resource["relationships"])
    if "links" in resource:
        validate_links(resource["links"])
    if "meta" in resource:
        validate_meta(resource["meta"])


def validate_resource(resource: Any) -> None:
    """Validate a resource object that must carry an ``id``."""
    validate_primary_resource(resource)
    ensure("id" in resource, messages.RESOURCE_MISSING_ID)


def validate_attributes(attributes: Any) -> None:
    ensure(is_object(attributes), messages.ATTRIBUTES_NOT_OBJECT)


def validate_relationships(relationships: Any) -> None:
    ensure(is_object(relationships), messages.RELATIONSHIPS_NOT_OBJECT)
    for relationship in relationships.values():
        validate_relationship(relationship)


def validate_relationship(relationship: Any) -> None:
    """Validate a single relationship object."""
    ensure(is_object(relationship), messages.RELATIONSHIP_NOT_OBJECT)
    ensure(len(relationship) > 0, messages.RELATIONSHIP_MISSING_MEMBER)
    if "data" in relationship:
        validate_relationship_data(relationship["data"])
    if "links" in relationship:
        validate_relationship_links(relationship["links"])
    if "meta" in relationship:
        validate_meta(relationship["meta"])


def validate_relationship_data(data: Any) -> None:
    """Validate resource linkage: null, one identifier or a list of them."""
    kind = kind_of(data)
    if kind is JsonKind.NULL:
        return
    elif kind is JsonKind.OBJECT:
        validate_resource_identifier(data)
    elif kind is JsonKind.ARRAY:
        for identifier in data:
            validate_resource_identifier(identifier)
    else:
        ensure(False, messages.RELATIONSHIP_DATA_KIND)


def validate_resource_identifier(identifier: Any) -> None:
    """Validate a resource identifier object.

    Both ``id`` and ``type`` must be present and be strings. Member order in
    the mapping is irrelevant.
    """
    ensure(is_object(identifier), messages.IDENTIFIER_NOT_OBJECT)
    ensure(RESOURCE_IDENTIFIER_KEYS.issubset(identifier.keys()),
           messages.IDENTIFIER_MISSING_MEMBERS)
    ensure(is_string(identifier["id"]), messages.IDENTIFIER_ID_NOT_STRING)
    ensure(is_string(identifier["type"]), messages.IDENTIFIER_TYPE_NOT_STRING)
    if "meta" in identifier:
        validate_meta(identifier["meta"])


def validate_relationship_links(links: Any) -> None:
    validate_links(links)
    ensure(not RELATIONSHIP_LINK_KEYS.isdisjoint(links.keys()),
           messages.RELATIONSHIP_LINKS_MISSING_MEMBER)


def validate_links(links: Any) -> None:
    ensure(is_object(links), messages.LINKS_NOT_OBJECT)
    for link in links.values():
        validate_link(link)


def validate_link(link: Any) -> None:
    """Validate a single link value.

    Object-form links are accepted without inspection until their members
    are pinned down (https://github.com/json-api/json-api/issues/1103).
    """
    kind = kind_of(link)
    if kind is JsonKind.STRING:
        return
    elif kind is JsonKind.OBJECT:
        return
    else:
        ensure(False, messages.LINK_KIND)


def validate_meta(meta: Any) -> None:
    ensure(is_object(meta), messages.META_NOT_OBJECT)


def validate_jsonapi(jsonapi: Any) -> None:
    """Validate the top-level ``jsonapi`` object."""
    ensure(is_object(jsonapi), messages.JSONAPI_NOT_OBJECT)
    ensure(JSONAPI_OBJECT_KEYS.issuperset(jsonapi.keys()),
           messages.JSONAPI_UNEXPECTED_MEMBERS)
    if "version" in jsonapi:
        ensure(is_string(jsonapi["version"]),
               messages.JSONAPI_VERSION_NOT_STRING)
    if "meta" in jsonapi:
        validate_meta(jsonapi["meta"])


def validate_included(included: Any) -> None:
    ensure(is_array(included), messages.INCLUDED_NOT_ARRAY)
    for resource in included:
        validate_resource(resource)


def validate_errors(errors: Any) -> None:
    ensure(is_array(errors), messages.ERRORS_NOT_ARRAY)
    for error in errors:
        validate_error(error)


def validate_error(error: Any) -> None:
    """Accept any error object.

    Error objects are under-specified as of JSON:API 1.0, so no structure
    is enforced on them yet.
    """
    return None
