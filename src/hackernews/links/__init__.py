"""
Link domain: record type, document mapping and repository
"""

from .models import Link, link_from_document, link_to_document
from .repository import LinkRepository

__all__ = ["Link", "LinkRepository", "link_from_document", "link_to_document"]
