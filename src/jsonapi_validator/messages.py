"""Failure messages reported by the validators.

Consumers match on these strings, so the text (including the rendered
member lists and the missing trailing periods) must not change.
"""

# Top level
ROOT_NOT_OBJECT = (
    "A JSON object MUST be at the root of every JSON API request and "
    "response containing data."
)
PAYLOAD_ROOT_NOT_OBJECT = (
    "A JSON object MUST be at the root of every JSONAPI request and "
    "response containing data."
)
MISSING_TOP_LEVEL_MEMBER = 'A document MUST contain at least one of ["data", "errors", "meta"].'
DATA_AND_ERRORS = "The members data and errors MUST NOT coexist in the same document."
INCLUDED_WITHOUT_DATA = (
    "If a document does not contain a top-level data key, the included "
    "member MUST NOT be present either."
)
PRIMARY_DATA_KIND = "Primary data must be either nil, an object or an array."
INCLUDED_NOT_ARRAY = "Top level included member must be an array."
ERRORS_NOT_ARRAY = "Top level errors member must be an array."

# Resource objects
RESOURCE_NOT_OBJECT = "A resource object must be an object."
RESOURCE_MISSING_TYPE = "A resource object must have a type."
RESOURCE_MISSING_ID = "A resource object must have an id."
ATTRIBUTES_NOT_OBJECT = "The value of the attributes key MUST be an object."
RELATIONSHIPS_NOT_OBJECT = "The value of the relationships key MUST be an object"

# Relationships and linkage
RELATIONSHIP_NOT_OBJECT = "A relationship object must be an object."
RELATIONSHIP_MISSING_MEMBER = 'A relationship object MUST contain at least one of ["data", "links", "meta"]'
RELATIONSHIP_DATA_KIND = "Relationship data must be either nil, an object or an array."
IDENTIFIER_NOT_OBJECT = "A resource identifier object must be an object"
IDENTIFIER_MISSING_MEMBERS = 'A resource identifier object MUST contain ["id", "type"] members.'
IDENTIFIER_ID_NOT_STRING = "Member id must be a string."
IDENTIFIER_TYPE_NOT_STRING = "Member type must be a string."
RELATIONSHIP_LINKS_MISSING_MEMBER = 'A relationship link must contain at least one of ["self", "related"].'

# Links, meta, jsonapi
LINKS_NOT_OBJECT = "A links object must be an object."
LINK_KIND = "The value of a link must be either a string or an object."
META_NOT_OBJECT = "A meta object must be an object."
JSONAPI_NOT_OBJECT = "A JSONAPI object must be an object."
JSONAPI_UNEXPECTED_MEMBERS = 'Unexpected members for JSONAPI object: ["version", "meta"].'
JSONAPI_VERSION_NOT_STRING = "Value of JSONAPI's version member must be a string."

# Request payloads
RESOURCE_PAYLOAD_SHAPE = "The request MUST include a single resource object as primary data."
RELATIONSHIP_PAYLOAD_SHAPE = "A relationship update payload must contain primary data."
