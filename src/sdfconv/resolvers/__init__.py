"""Property value resolvers."""

from .database_links import DATABASE_LINKS, expand_url, resolve

__all__ = ["DATABASE_LINKS", "expand_url", "resolve"]
