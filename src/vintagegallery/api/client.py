"""Async HTTP client for the remote record store.

The store exposes exactly two operations, both on ``{backend_url}/api/art``:

========  =====================================================
Method    Purpose
========  =====================================================
GET       Full ordered collection of artwork records
POST      Create a record (any 2xx status counts as created)
========  =====================================================

This client only speaks HTTP.  Deciding what a failure means for the
gallery is left to :class:`~vintagegallery.core.collection_store.CollectionStore`.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import TypeAdapter

from vintagegallery.api.models import ArtworkCreate, ArtworkRecord
from vintagegallery.core.config import GalleryConfig

logger = logging.getLogger(__name__)

_records_adapter = TypeAdapter(list[ArtworkRecord])


class ArtStoreClient:
    """Thin wrapper around ``httpx.AsyncClient`` for the art endpoints.

    Args:
        config: Gallery configuration (base address and timeout)
        transport: Optional httpx transport, used by tests to stand in
            for the real store
    """

    def __init__(self, config: GalleryConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self.url = config.art_url
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(config.request_timeout),
            transport=transport,
        )

    async def list_art(self) -> list[ArtworkRecord]:
        """Fetch the whole collection in store order.

        Raises:
            httpx.HTTPError: On transport failure or a non-success status
            ValueError: If the body is not JSON
            pydantic.ValidationError: If the body is not a list of records
        """
        logger.debug(f"GET {self.url}")
        response = await self._client.get(self.url)
        response.raise_for_status()
        return _records_adapter.validate_python(response.json())

    async def create_art(self, artwork: ArtworkCreate) -> httpx.Response:
        """Send a new record to the store.

        The response is returned unchecked; the store defines no body
        contract, so callers only look at the status.

        Raises:
            httpx.HTTPError: On transport failure
        """
        logger.debug(f"POST {self.url} title={artwork.title!r} tags={artwork.tags}")
        return await self._client.post(self.url, json=artwork.to_payload())

    async def aclose(self) -> None:
        """Release the underlying connection pool."""
        await self._client.aclose()

    async def __aenter__(self) -> ArtStoreClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
