"""
Seed data for a fresh links collection.
"""

from __future__ import annotations

from ..links import Link, LinkRepository
from ..logging import get_logger

logger = get_logger(__name__)

SAMPLE_LINKS: list[tuple[str, str]] = [
    ("http://howtographql.com", "Your favorite GraphQL page"),
    ("http://graphql.org/learn/", "The official docs"),
]


async def seed_sample_links(repository: LinkRepository) -> list[Link]:
    """
    Insert the sample links.

    Links are never deduplicated, so running this twice stores each sample
    twice.

    Returns:
        The created links, in insertion order
    """
    created = []
    for url, description in SAMPLE_LINKS:
        link = await repository.create(url, description)
        logger.info("Seeded link", link_id=link.id, url=url)
        created.append(link)
    return created
