"""Client package for DEX subgraphs."""

from .errors import TagFetchError
from .paginator import PairPaginator, PaginationState
from .thegraph import TheGraphClient

__all__ = ["TheGraphClient", "PairPaginator", "PaginationState", "TagFetchError"]
