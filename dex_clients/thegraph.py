import logging
from typing import Any, Dict, List, Optional

import aiohttp
from gql import Client, gql
from gql.transport.aiohttp import AIOHTTPTransport
from gql.transport.exceptions import (
    TransportProtocolError,
    TransportQueryError,
    TransportServerError,
)

from config import PAGE_SIZE
from dex_clients.errors import (
    ResponseShapeError,
    SubgraphQueryError,
    SubgraphTransportError,
    UnknownFetchError,
)
from dex_clients.paginator import OnPage, PairPaginator

HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def build_pairs_query(page_size: int = PAGE_SIZE):
    """Return the pairs query, ascending by creation time after ``$cursor``."""
    return gql(
        """
        query pairs($cursor: Int!) {
          pairs(
            first: %d
            orderBy: createdAtTimestamp
            orderDirection: asc
            where: {createdAtTimestamp_gt: $cursor}
          ) {
            id
            createdAtTimestamp
            txCount
            token0 { id symbol name }
            token1 { id symbol name }
          }
        }
        """
        % page_size
    )


class TheGraphClient:
    """Asynchronous client for the Honeyswap pairs subgraph."""

    def __init__(self, endpoint: str, page_size: int = PAGE_SIZE) -> None:
        self.endpoint = endpoint
        self.page_size = page_size
        self.query = build_pairs_query(page_size)
        # non-2xx answers raise before gql reads an "errors" body from them
        self.transport = AIOHTTPTransport(
            url=self.endpoint,
            headers=HEADERS,
            client_session_args={"raise_for_status": True},
        )
        self.logger = logging.getLogger(self.__class__.__name__)

    async def fetch_pairs_page(self, session, cursor: int) -> List[Dict[str, Any]]:
        """Fetch one page of pairs created strictly after ``cursor``."""
        try:
            result = await session.execute(self.query, variable_values={"cursor": cursor})
        except TransportQueryError as exc:
            messages = _error_messages(exc)
            for message in messages:
                self.logger.error("Subgraph error: %s", message)
            raise SubgraphQueryError(messages) from exc
        except aiohttp.ClientResponseError as exc:
            # str(exc) carries the request url, which embeds the api key
            raise SubgraphTransportError(
                f"Subgraph request failed with status {exc.status}", status=exc.status
            ) from exc
        except TransportServerError as exc:
            raise SubgraphTransportError(
                f"Subgraph request failed with status {exc.code}", status=exc.code
            ) from exc
        except TransportProtocolError as exc:
            raise ResponseShapeError(f"Malformed subgraph response: {exc}") from exc
        except Exception as exc:
            raise UnknownFetchError(f"Unexpected error while fetching pairs: {exc!r}") from exc

        pairs = result.get("pairs") if isinstance(result, dict) else None
        if not isinstance(pairs, list):
            raise ResponseShapeError("Subgraph response has no pairs list")
        return pairs

    async def fetch_all_pairs(self, on_page: Optional[OnPage] = None) -> List[Dict]:
        """Fetch every pair of the subgraph, calling ``on_page`` for each page."""
        async with Client(transport=self.transport, fetch_schema_from_transport=False) as session:

            async def fetch_page(cursor: int) -> List[Dict[str, Any]]:
                return await self.fetch_pairs_page(session, cursor)

            paginator = PairPaginator(fetch_page, page_size=self.page_size)
            pairs = await paginator.run(on_page)
        # endpoint embeds the api key, keep it out of the logs
        self.logger.info("Fetched %d pairs from the subgraph", len(pairs))
        return pairs


def _error_messages(exc: TransportQueryError) -> List[str]:
    messages = []
    for error in exc.errors or []:
        if isinstance(error, dict):
            messages.append(str(error.get("message", error)))
        else:
            messages.append(str(error))
    return messages or [str(exc)]
