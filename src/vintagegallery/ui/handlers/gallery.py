"""Gallery grid handlers: loading, refreshing and rendering artwork cards."""

import logging
from collections.abc import AsyncIterator

import gradio as gr
from PIL import Image

from vintagegallery.api.models import ArtworkRecord
from vintagegallery.core.config import config
from vintagegallery.core.errors import ReadFailure
from vintagegallery.core.ingestion import decode_image

from ..models import EMPTY_GALLERY_MESSAGE, LOADING_MESSAGE, GallerySession
from ..state import initialize_session

logger = logging.getLogger(__name__)


def format_caption(record: ArtworkRecord) -> str:
    """Build the card caption shown under an artwork.

    Args:
        record: Artwork to describe

    Returns:
        Title, then "by <artist>", description and #tags when present
    """
    lines = [record.title]
    if record.artist:
        lines.append(f"by {record.artist}")
    if record.description:
        lines.append(record.description)
    if record.tags:
        lines.append(" ".join(f"#{tag}" for tag in record.tags))
    return "\n".join(lines)


def render_gallery(records: list[ArtworkRecord]) -> list[tuple[Image.Image, str]]:
    """Convert records into ``gr.Gallery`` items.

    Records whose image cannot be decoded (the uploader accepts any file)
    are left out of the grid.

    Args:
        records: Published records in store order

    Returns:
        List of (image, caption) pairs
    """
    items = []
    for record in records:
        try:
            image = decode_image(record.image_data)
        except ReadFailure as e:
            logger.warning(f"Skipping artwork {record.id}: {e}")
            continue
        items.append((image, format_caption(record)))
    return items


def gallery_status(state: GallerySession) -> str:
    """Status line shown above the grid."""
    if state.collection.loading:
        return LOADING_MESSAGE
    if not state.collection.items:
        return EMPTY_GALLERY_MESSAGE
    return ""


async def load_gallery(
    state: GallerySession,
) -> AsyncIterator[tuple[list, str, GallerySession]]:
    """Load (or reload) the collection and render it.

    Yields twice: first the loading status while the request is in flight,
    then the rendered grid.  A failed load keeps showing the previous
    records; the failure is only logged.

    Args:
        state: Gallery session

    Yields:
        Tuple of (gallery_items, status_markdown, updated_state)
    """
    state = initialize_session(state, config)

    yield gr.update(), LOADING_MESSAGE, state

    result = await state.collection.load()
    if not result.ok:
        logger.warning(f"Showing previous gallery snapshot: {result.error}")

    yield render_gallery(state.collection.items), gallery_status(state), state
