"""Honeyswap pool tags for Gnosis chain."""
from __future__ import annotations

import logging

from config import API_KEY_PLACEHOLDER, SUBGRAPH_ENDPOINT, SUPPORTED_CHAIN_ID
from dex_clients.errors import TagFetchError, UnknownFetchError, UnsupportedChainError
from dex_clients.thegraph import TheGraphClient
from tags.transform import Tag, transform_pairs

logger = logging.getLogger(__name__)


def resolve_endpoint(api_key: str, template: str = SUBGRAPH_ENDPOINT) -> str:
    return template.replace(API_KEY_PLACEHOLDER, api_key)


async def return_tags(chain_id: str, api_key: str) -> list[Tag]:
    """Fetch every Honeyswap pair and return the tags of the valid ones.

    Raises :class:`UnsupportedChainError` before any network access when
    ``chain_id`` is not supported, and :class:`TagFetchError` wrapping the
    underlying cause when any page fetch fails.
    """
    if chain_id != SUPPORTED_CHAIN_ID:
        raise UnsupportedChainError(chain_id)

    tags: list[Tag] = []

    def add_page(page: list[dict]) -> None:
        tags.extend(transform_pairs(chain_id, page))

    try:
        client = TheGraphClient(resolve_endpoint(api_key, SUBGRAPH_ENDPOINT))
        pairs = await client.fetch_all_pairs(on_page=add_page)
    except TagFetchError as exc:
        raise TagFetchError(f"Error fetching Honeyswap pairs on chain {chain_id}: {exc}") from exc
    except Exception as exc:
        raise UnknownFetchError(
            f"Unexpected error fetching Honeyswap pairs on chain {chain_id}: {exc!r}"
        ) from exc

    logger.info("Built %d tags from %d pairs (%d rejected)", len(tags), len(pairs), len(pairs) - len(tags))
    return tags
