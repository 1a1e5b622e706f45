"""
Unit tests for the Link document mapping
"""

import dataclasses

import pytest
from bson import ObjectId

from hackernews.links import Link, link_from_document, link_to_document


@pytest.mark.unit
def test_link_from_document_renders_object_id_as_hex():
    oid = ObjectId("5a9b1f2e3c4d5e6f7a8b9c0d")

    link = link_from_document({"_id": oid, "url": "http://a.example", "description": "A"})

    assert link == Link(id="5a9b1f2e3c4d5e6f7a8b9c0d", url="http://a.example", description="A")


@pytest.mark.unit
def test_link_from_document_missing_fields_map_to_none():
    link = link_from_document({"_id": ObjectId("5a9b1f2e3c4d5e6f7a8b9c0d")})

    assert link.url is None
    assert link.description is None


@pytest.mark.unit
def test_link_from_document_ignores_extra_fields():
    link = link_from_document(
        {"_id": "custom-id", "url": "u", "description": "d", "votes": 3}
    )

    assert link == Link(id="custom-id", url="u", description="d")


@pytest.mark.unit
def test_link_to_document_leaves_id_to_the_store():
    assert link_to_document("http://a.example", "A") == {
        "url": "http://a.example",
        "description": "A",
    }


@pytest.mark.unit
def test_link_is_immutable():
    link = Link(id="1", url="u", description="d")

    with pytest.raises(dataclasses.FrozenInstanceError):
        link.url = "other"  # type: ignore[misc]
