"""Repository for the links collection."""

from __future__ import annotations

from typing import Any

from bson import ObjectId

from ..logging import get_logger
from .models import ID_FIELD, Link, link_from_document, link_to_document

logger = get_logger(__name__)


class LinkRepository:
    """Find-all, find-by-id and insert-one over a links collection.

    The collection is any async MongoDB collection (``pymongo``'s
    ``AsyncCollection`` in production). Driver errors are not caught.
    """

    def __init__(self, collection: Any):
        self._links = collection

    async def get_all(self) -> list[Link]:
        links = []
        async for doc in self._links.find():
            links.append(link_from_document(doc))
        return links

    async def get_by_id(self, id: str) -> Link | None:
        """Look up a link by its identifier.

        Raises ``bson.errors.InvalidId`` when ``id`` is not a valid ObjectId.
        """
        doc = await self._links.find_one({ID_FIELD: ObjectId(id)})
        if doc is None:
            return None
        return link_from_document(doc)

    async def create(self, url: str, description: str) -> Link:
        doc = link_to_document(url, description)
        result = await self._links.insert_one(doc)
        logger.debug("Link stored", link_id=str(result.inserted_id))
        return Link(id=str(result.inserted_id), url=url, description=description)
