"""
Link GraphQL type definitions
"""

from __future__ import annotations

import strawberry

from ...links import Link as LinkRecord


@strawberry.type
class Link:
    """Link type for GraphQL API."""

    id: strawberry.ID
    url: str
    description: str

    @classmethod
    def from_record(cls, record: LinkRecord) -> Link:
        return cls(
            id=strawberry.ID(record.id),
            url=record.url,
            description=record.description,
        )
