"""Upload form controller: draft ownership and submission lifecycle.

State machine::

    Idle --open()--> Editing --submit()--> Submitting --ok--> Idle
                       ^                        |
                       +--------failure---------+

``close()`` returns to Idle from any state and discards the draft without
asking.  A create already in flight is not cancelled; when it completes it
leaves the controller alone, including any draft opened in the meantime.
"""

import logging
from pathlib import Path
from typing import BinaryIO

from vintagegallery.api.models import ArtworkCreate
from vintagegallery.core.collection_store import CollectionStore
from vintagegallery.core.errors import ReadFailure
from vintagegallery.core.ingestion import ImageIngestionPipeline
from vintagegallery.core.results import Result

from .models import DRAFT_TEXT_FIELDS, UploaderState, UploadDraft
from .validation import is_submittable, optional_text, parse_tags

logger = logging.getLogger(__name__)


class UploadFormController:
    """Owns the single active upload draft.

    Args:
        collection: Store that receives submitted records
        pipeline: Encoder used to attach image files
    """

    def __init__(self, collection: CollectionStore, pipeline: ImageIngestionPipeline):
        self.collection = collection
        self.pipeline = pipeline
        self.state = UploaderState.IDLE
        self.draft: UploadDraft | None = None

    @property
    def is_open(self) -> bool:
        """True while a draft is being edited or submitted."""
        return self.state is not UploaderState.IDLE

    def open(self) -> UploadDraft:
        """Open the uploader with an empty draft.

        Opening an uploader that is already open keeps the current draft.
        """
        if self.state is UploaderState.IDLE:
            self.draft = UploadDraft()
            self.state = UploaderState.EDITING
            logger.debug("Uploader opened")
        return self.draft

    def close(self) -> None:
        """Close the uploader and discard the draft."""
        if self.state is UploaderState.SUBMITTING:
            logger.info("Uploader closed while a submission is in flight")
        self.draft = None
        self.state = UploaderState.IDLE

    def set_field(self, name: str, value: str) -> None:
        """Update one text field of the draft.

        No cross-field validation happens here.  Input arriving while the
        uploader is not editing is ignored.

        Args:
            name: One of ``title``, ``description``, ``artist``, ``tags_raw``
            value: New field text

        Raises:
            ValueError: If name is not a draft text field
        """
        if name not in DRAFT_TEXT_FIELDS:
            raise ValueError(f"Unknown draft field: {name}")
        if self.state is not UploaderState.EDITING:
            logger.warning(f"Ignoring {name} update while uploader is {self.state.value}")
            return
        setattr(self.draft, name, value)

    def set_title(self, value: str) -> None:
        """Set the draft title."""
        self.set_field("title", value)

    def set_description(self, value: str) -> None:
        """Set the draft description."""
        self.set_field("description", value)

    def set_artist(self, value: str) -> None:
        """Set the draft artist."""
        self.set_field("artist", value)

    def set_tags(self, value: str) -> None:
        """Set the raw comma-separated tag text."""
        self.set_field("tags_raw", value)

    async def attach_image(self, file: str | Path | BinaryIO) -> bool:
        """Encode a file and store it as the draft's image.

        A failed read leaves the draft untouched.

        Returns:
            True if the image was attached
        """
        if self.state is not UploaderState.EDITING:
            logger.warning(f"Ignoring image while uploader is {self.state.value}")
            return False

        draft = self.draft
        try:
            encoded = await self.pipeline.encode(file)
        except ReadFailure as e:
            logger.warning(f"Image not attached: {e}")
            return False

        draft.image_data = encoded
        return True

    def build_artwork(self) -> ArtworkCreate:
        """Turn the current draft into a store submission."""
        draft = self.draft
        return ArtworkCreate(
            title=draft.title,
            description=optional_text(draft.description),
            artist=optional_text(draft.artist),
            tags=parse_tags(draft.tags_raw),
            image_data=draft.image_data,
        )

    async def submit(self) -> Result | None:
        """Send the draft to the store.

        Does nothing unless the uploader is editing a draft with a title and
        an image.  On success the draft is discarded and the uploader
        closes; on failure the draft is kept for another try.

        Returns:
            None if the guard blocked the submission, otherwise the Result of
            the create
        """
        if self.state is not UploaderState.EDITING or not is_submittable(self.draft):
            logger.debug("Submit ignored: title and image are required")
            return None

        draft = self.draft
        artwork = self.build_artwork()
        self.state = UploaderState.SUBMITTING
        result = await self.collection.create(artwork)

        if self.draft is not draft:
            # Closed (and possibly reopened) while the request was in flight
            return result

        if result.ok:
            self.draft = None
            self.state = UploaderState.IDLE
        else:
            logger.warning(f"Submission failed, draft kept for retry: {result.error}")
            self.state = UploaderState.EDITING
        return result
