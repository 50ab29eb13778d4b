"""State management utilities for the gallery UI.

This module wires the per-session components together: the remote store
client, the collection store, the ingestion pipeline and the upload
controller.  Configuration is passed in explicitly; nothing here reads
process-wide settings.
"""

import logging

import httpx

from vintagegallery.api.client import ArtStoreClient
from vintagegallery.core.collection_store import CollectionStore
from vintagegallery.core.config import GalleryConfig
from vintagegallery.core.ingestion import ImageIngestionPipeline

from .models import GallerySession
from .uploader import UploadFormController

logger = logging.getLogger(__name__)


def initialize_session(
    state: GallerySession | None,
    config: GalleryConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> GallerySession:
    """Initialize or ensure a gallery session is ready.

    Missing components are created; components already present are kept,
    so calling this on every event is cheap.

    Args:
        state: Existing GallerySession or None
        config: Configuration for the remote store and ingestion
        transport: Optional httpx transport for the store client

    Returns:
        Initialized GallerySession instance
    """
    if state is None:
        logger.info("Creating new GallerySession")
        state = GallerySession()

    if state.is_initialized():
        return state

    logger.info("Initializing GallerySession components...")

    if state.client is None:
        logger.info(f"Connecting to record store at {config.backend_url}")
        state.client = ArtStoreClient(config, transport=transport)

    if state.collection is None:
        state.collection = CollectionStore(state.client)

    if state.pipeline is None:
        state.pipeline = ImageIngestionPipeline(config)

    if state.uploader is None:
        state.uploader = UploadFormController(state.collection, state.pipeline)

    logger.info(f"GallerySession initialization complete: {state}")
    return state


async def cleanup_session(state: GallerySession) -> None:
    """Release session resources.

    This should be called when a session ends.  In-flight requests are not
    waited for.

    Args:
        state: Session to clean up
    """
    logger.info("Cleaning up GallerySession resources")

    if state.uploader is not None:
        state.uploader.close()

    if state.client is not None:
        try:
            await state.client.aclose()
        except httpx.HTTPError as e:
            logger.error(f"Error closing store client: {e}")

    state.client = None
    state.collection = None
    state.pipeline = None
    state.uploader = None
