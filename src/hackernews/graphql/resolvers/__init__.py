"""Resolver package for the GraphQL schema.

Each function here backs exactly one schema field and delegates to the
``LinkRepository`` found in the GraphQL context.
"""

# Intentionally empty; functions are defined in sibling modules.
