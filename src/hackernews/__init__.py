"""
Hackernews Links API
GraphQL backend for sharing links
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
