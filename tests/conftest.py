"""Shared payload fixtures for validator tests."""

import copy

import pytest


ARTICLE_DOCUMENT = {
    "data": [
        {
            "type": "articles",
            "id": "1",
            "attributes": {"title": "JSON API paints my bikeshed!"},
            "links": {"self": "http://example.com/articles/1"},
            "relationships": {
                "author": {
                    "links": {
                        "self": "http://example.com/articles/1/relationships/author",
                        "related": "http://example.com/articles/1/author"
                    },
                    "data": {"type": "people", "id": "9"}
                },
                "journal": {
                    "data": None
                },
                "comments": {
                    "links": {
                        "self": "http://example.com/articles/1/relationships/comments",
                        "related": "http://example.com/articles/1/comments"
                    },
                    "data": [
                        {"type": "comments", "id": "5"},
                        {"type": "comments", "id": "12"}
                    ]
                }
            }
        }
    ],
    "meta": {"count": "13"}
}


@pytest.fixture
def article_document():
    """Valid compound-free response with one article and its linkage."""
    return copy.deepcopy(ARTICLE_DOCUMENT)


@pytest.fixture
def article(article_document):
    """The article resource object inside article_document."""
    return article_document["data"][0]


@pytest.fixture
def compound_document():
    """Valid response whose author is sideloaded under included."""
    return {
        "data": [
            {
                "type": "articles",
                "id": "1",
                "relationships": {
                    "author": {
                        "data": {"type": "people", "id": "9"}
                    }
                }
            }
        ],
        "included": [
            {
                "type": "people",
                "id": "9"
            }
        ]
    }


@pytest.fixture
def new_article_payload():
    """Create request body for an article without a client-generated id."""
    return {
        "data": {
            "type": "articles",
            "attributes": {"title": "Ember Hamster"},
            "relationships": {
                "photographer": {
                    "data": {"type": "people", "id": "9"}
                }
            }
        }
    }
