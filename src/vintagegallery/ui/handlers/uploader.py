"""Uploader panel handlers: draft editing, image attachment and submission."""

import logging

import gradio as gr
from PIL import Image

from vintagegallery.core.config import config
from vintagegallery.core.errors import ReadFailure
from vintagegallery.core.ingestion import decode_image

from ..models import GallerySession
from ..state import initialize_session
from .gallery import gallery_status, render_gallery

logger = logging.getLogger(__name__)


def open_uploader(state: GallerySession) -> tuple[dict, str, str, str, str, None, GallerySession]:
    """Show the uploader panel with an empty draft.

    Returns:
        Tuple of (panel_update, title, artist, description, tags, preview,
        updated_state) with all inputs cleared
    """
    state = initialize_session(state, config)
    draft = state.uploader.open()
    return (
        gr.update(visible=True),
        draft.title,
        draft.artist,
        draft.description,
        draft.tags_raw,
        None,
        state,
    )


def close_uploader(state: GallerySession) -> tuple[dict, GallerySession]:
    """Hide the uploader panel and discard the draft.

    Returns:
        Tuple of (panel_update, updated_state)
    """
    state = initialize_session(state, config)
    state.uploader.close()
    return gr.update(visible=False), state


def update_title(value: str, state: GallerySession) -> GallerySession:
    state = initialize_session(state, config)
    state.uploader.set_title(value)
    return state


def update_artist(value: str, state: GallerySession) -> GallerySession:
    state = initialize_session(state, config)
    state.uploader.set_artist(value)
    return state


def update_description(value: str, state: GallerySession) -> GallerySession:
    state = initialize_session(state, config)
    state.uploader.set_description(value)
    return state


def update_tags(value: str, state: GallerySession) -> GallerySession:
    state = initialize_session(state, config)
    state.uploader.set_tags(value)
    return state


def preview_image(state: GallerySession) -> Image.Image | None:
    """Decode the draft's image for the preview pane, if there is one."""
    draft = state.uploader.draft
    if draft is None or not draft.has_image():
        return None
    try:
        return decode_image(draft.image_data)
    except ReadFailure as e:
        logger.info(f"Attached file has no previewable image: {e}")
        return None


async def attach_image(
    file_path: str | None, state: GallerySession
) -> tuple[Image.Image | None, GallerySession]:
    """Encode a picked or dropped file into the draft.

    Args:
        file_path: Path of the uploaded file (None when the picker is cleared)
        state: Gallery session

    Returns:
        Tuple of (preview_image, updated_state)
    """
    state = initialize_session(state, config)
    if file_path:
        await state.uploader.attach_image(file_path)
    return preview_image(state), state


async def submit_upload(state: GallerySession) -> tuple[dict, list | dict, str, GallerySession]:
    """Submit the draft and refresh the grid on success.

    A blocked or failed submission leaves the panel open with the draft
    intact; nothing is shown to the user.

    Returns:
        Tuple of (panel_update, gallery_items, status_markdown, updated_state)
    """
    state = initialize_session(state, config)
    result = await state.uploader.submit()

    if result is None or not result.ok:
        return gr.update(), gr.update(), gr.update(), state

    return (
        gr.update(visible=False),
        render_gallery(state.collection.items),
        gallery_status(state),
        state,
    )
