"""jsonapi-validator - structural validation of JSON:API documents.

Validates already-decoded JSON values against the structural rules of the
JSON:API specification and raises InvalidDocument on the first violation.

Basic usage:
    from jsonapi_validator import InvalidDocument, validate_document

    try:
        validate_document(json.loads(body))
    except InvalidDocument as e:
        print(e.message)
"""

__version__ = "0.1.0"
__author__ = "jsonapi-validator contributors"
__description__ = "Structural validation of JSON:API documents and request payloads"

from jsonapi_validator.document import validate_document
from jsonapi_validator.exceptions import InvalidDocument
from jsonapi_validator.json_types import JsonKind, kind_of
from jsonapi_validator.relationship import validate_relationship_payload
from jsonapi_validator.report import PayloadKind, ValidationReport, check, validate
from jsonapi_validator.resource import validate_resource_payload

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "InvalidDocument",
    "JsonKind",
    "kind_of",
    "validate_document",
    "validate_resource_payload",
    "validate_relationship_payload",
    "PayloadKind",
    "ValidationReport",
    "check",
    "validate",
]
