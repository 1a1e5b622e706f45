"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.link import Link


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="createLink")
    async def create_link(self, info: strawberry.Info, url: str, description: str) -> Link:
        """Create a new link."""
        from ..resolvers.link import create_link

        return await create_link(info, url, description)
