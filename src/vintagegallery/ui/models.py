"""Data models for the gallery UI session and upload draft."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class UploaderState(str, Enum):
    """Lifecycle of the upload panel."""

    IDLE = "idle"  # Uploader closed
    EDITING = "editing"  # Draft open for input
    SUBMITTING = "submitting"  # Create request in flight


@dataclass
class UploadDraft:
    """Uncommitted artwork being composed in the uploader.

    Mirrors an artwork record minus its id.  Tags are kept as the raw
    comma-separated text the user typed and only parsed on submit.
    """

    title: str = ""
    description: str = ""
    artist: str = ""
    tags_raw: str = ""
    image_data: str = ""  # Encoded image string, empty until a file is attached

    def has_image(self) -> bool:
        """Check if an image has been attached."""
        return bool(self.image_data)


# Draft fields the user edits directly; image_data is set by attaching a file
DRAFT_TEXT_FIELDS = ("title", "description", "artist", "tags_raw")


@dataclass
class GallerySession:
    """Per-user session state for the Gradio UI.

    Each browser session gets its own instance through ``gr.State``, so
    the collection and the draft are never shared between users.

    Attributes
    ----------
    client : Any | None
        ArtStoreClient instance talking to the remote store
    collection : Any | None
        CollectionStore instance publishing the records
    pipeline : Any | None
        ImageIngestionPipeline instance encoding uploads
    uploader : Any | None
        UploadFormController instance owning the draft
    """

    client: Any | None = None  # ArtStoreClient instance
    collection: Any | None = None  # CollectionStore instance
    pipeline: Any | None = None  # ImageIngestionPipeline instance
    uploader: Any | None = None  # UploadFormController instance

    def is_initialized(self) -> bool:
        """Check if all session components are in place.

        Returns:
            True if client, collection, pipeline and uploader are set
        """
        return (
            self.client is not None
            and self.collection is not None
            and self.pipeline is not None
            and self.uploader is not None
        )

    def __repr__(self) -> str:
        """String representation for debugging."""
        count = len(self.collection.items) if self.collection is not None else 0
        uploader = self.uploader.state.value if self.uploader is not None else "-"
        return (
            f"GallerySession(initialized={self.is_initialized()}, "
            f"items={count}, uploader={uploader})"
        )


# UI text
LOADING_MESSAGE = "*Loading gallery...*"
EMPTY_GALLERY_MESSAGE = "*No artworks yet. Use Upload to add the first piece.*"
