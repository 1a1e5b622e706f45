"""
Root GraphQL query definitions
"""

import strawberry

from ..types.link import Link


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field(name="allLinks")
    async def all_links(self, info: strawberry.Info) -> list[Link]:
        """Get every stored link."""
        from ..resolvers.link import resolve_all_links

        return await resolve_all_links(info)

    @strawberry.field
    async def link(self, info: strawberry.Info, id: strawberry.ID) -> Link | None:
        """Get a link by ID."""
        from ..resolvers.link import resolve_link_by_id

        return await resolve_link_by_id(info, str(id))
