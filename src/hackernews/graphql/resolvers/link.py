from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...links import LinkRepository
from ...logging import get_logger

if TYPE_CHECKING:
    from ..types.link import Link

logger = get_logger(__name__)


def get_link_repository(info: strawberry.Info) -> LinkRepository:
    """Fetch the repository the endpoint placed in the GraphQL context."""
    return info.context["link_repository"]


# Query resolvers
async def resolve_all_links(info: strawberry.Info) -> list[Link]:
    from ..types.link import Link as LinkType

    records = await get_link_repository(info).get_all()
    return [LinkType.from_record(record) for record in records]


async def resolve_link_by_id(info: strawberry.Info, id: str) -> Link | None:
    """
    Resolve a link by its ID.

    A malformed ID raises ``bson.errors.InvalidId``, which Strawberry reports
    in the response's ``errors``.
    """
    from ..types.link import Link as LinkType

    record = await get_link_repository(info).get_by_id(id)
    if record is None:
        logger.info("Link not found", link_id=id)
        return None
    return LinkType.from_record(record)


# Mutation resolvers
async def create_link(info: strawberry.Info, url: str, description: str) -> Link:
    from ..types.link import Link as LinkType

    record = await get_link_repository(info).create(url, description)
    logger.info("Link created", link_id=record.id)
    return LinkType.from_record(record)
