"""Address tags built from DEX pairs."""

from .honeyswap import return_tags
from .transform import Tag

__all__ = ["return_tags", "Tag"]
