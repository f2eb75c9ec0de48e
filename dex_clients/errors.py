"""Errors raised while fetching Honeyswap pairs."""
from __future__ import annotations


class TagFetchError(Exception):
    """Base error for every failure of a tag fetch."""


class UnsupportedChainError(TagFetchError):
    def __init__(self, chain_id: str) -> None:
        super().__init__(f"Unsupported chain id: {chain_id}")
        self.chain_id = chain_id


class SubgraphTransportError(TagFetchError):
    """The subgraph endpoint answered with a non-success HTTP status."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class SubgraphQueryError(TagFetchError):
    """The subgraph answered with a GraphQL ``errors`` array."""

    def __init__(self, messages: list[str]) -> None:
        super().__init__(f"Subgraph returned {len(messages)} error(s): {'; '.join(messages)}")
        self.messages = messages


class ResponseShapeError(TagFetchError):
    """The response does not carry the expected ``data.pairs`` list."""


class UnknownFetchError(TagFetchError):
    pass
