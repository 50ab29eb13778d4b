"""In-memory collection of artwork records synchronised with the remote store.

The store holds the last known server contents and replaces them wholesale
on every successful load.  Creates never insert locally; a successful create
triggers a fresh load so the published list always comes from the store.

Request Sequencing
------------------
Loads can overlap, for example a manual refresh racing the reload that
follows a create.  Each load takes a token from a counter; a response is
applied only if its token is still the latest one issued.  A slow, older
response therefore cannot overwrite a newer one.

Nothing is cancelled: an in-flight request still runs to completion, its
result is simply dropped if a newer load has started in the meantime.
"""

import logging

import httpx
from pydantic import ValidationError

from vintagegallery.api.client import ArtStoreClient
from vintagegallery.api.models import ArtworkCreate, ArtworkRecord

from .errors import CreateFailure, LoadFailure
from .results import Result

logger = logging.getLogger(__name__)


class CollectionStore:
    """Owner of the published list of artwork records.

    Attributes:
        loading: True while the most recently issued load is in flight
    """

    def __init__(self, client: ArtStoreClient):
        self.client = client
        self.loading = False
        self._items: list[ArtworkRecord] = []
        self._latest_token = 0

    @property
    def items(self) -> list[ArtworkRecord]:
        """Snapshot of the published records, in store order."""
        return list(self._items)

    async def load(self) -> Result:
        """Fetch the collection and replace the local list.

        On failure the previous snapshot stays published and the failure is
        logged.  ``loading`` is cleared when the latest issued load
        finishes, whatever its outcome.

        Returns:
            Result whose value is the published records.  A response
            superseded by a newer load is reported as a success carrying the
            current snapshot.
        """
        self._latest_token += 1
        token = self._latest_token
        self.loading = True

        try:
            records = await self.client.list_art()
        except (httpx.HTTPError, ValueError, ValidationError) as e:
            if token != self._latest_token:
                logger.debug(f"Ignoring failure of superseded load #{token}: {e}")
                return Result.success(self.items)
            logger.error(f"Failed to load gallery, keeping {len(self._items)} records: {e}")
            return Result.failure(LoadFailure(str(e)))
        finally:
            if token == self._latest_token:
                self.loading = False

        if token != self._latest_token:
            logger.debug(f"Discarding stale response of load #{token}")
            return Result.success(self.items)

        self._items = records
        logger.info(f"Loaded {len(records)} artworks")
        return Result.success(self.items)

    async def create(self, artwork: ArtworkCreate) -> Result:
        """Submit a new record and resynchronise on success.

        No retry is attempted.  The reload that follows a successful create
        is awaited before returning; its own failure does not turn the
        create into a failure.

        Returns:
            Result.success() once the store accepted the record, otherwise
            Result.failure(CreateFailure)
        """
        try:
            response = await self.client.create_art(artwork)
        except httpx.HTTPError as e:
            logger.error(f"Failed to create artwork {artwork.title!r}: {e}")
            return Result.failure(CreateFailure(str(e)))

        if not response.is_success:
            logger.error(
                f"Store rejected artwork {artwork.title!r} with status {response.status_code}"
            )
            return Result.failure(
                CreateFailure(f"Store returned {response.status_code}", response.status_code)
            )

        logger.info(f"Created artwork {artwork.title!r}")
        await self.load()
        return Result.success()
