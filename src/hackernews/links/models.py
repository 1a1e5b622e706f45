"""
Link record and its document mapping.

Field-name contract between a ``Link`` and a stored document:

    Link.id          <-> _id          (ObjectId, assigned by the store)
    Link.url         <-> url
    Link.description <-> description
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

ID_FIELD = "_id"
URL_FIELD = "url"
DESCRIPTION_FIELD = "description"


@dataclass(frozen=True)
class Link:
    """A shared link as seen by resolvers."""

    id: str
    url: str
    description: str


def link_from_document(doc: Mapping[str, Any]) -> Link:
    """Build a ``Link`` from a stored document.

    The identifier is rendered in its string form (24 hex characters for an
    ``ObjectId``). Absent ``url``/``description`` fields map to ``None``.
    """
    return Link(
        id=str(doc[ID_FIELD]),
        url=doc.get(URL_FIELD),
        description=doc.get(DESCRIPTION_FIELD),
    )


def link_to_document(url: str, description: str) -> dict[str, Any]:
    """Build the document for a new link; the store assigns ``_id`` on insert."""
    return {URL_FIELD: url, DESCRIPTION_FIELD: description}
