"""Email resolvers consumed by the ownership formatter."""

from .base import EmailResolver, ResolverFunc
from .directory import DirectoryEmailResolver

__all__ = ["EmailResolver", "ResolverFunc", "DirectoryEmailResolver"]
