"""Pydantic models for the remote record store's JSON contract.

These models define the shape of the two documented endpoints:

ArtworkRecord
    One element of the ``GET /api/art`` response body.
ArtworkCreate
    Body of ``POST /api/art``.  A record minus ``id``; the store assigns
    identifiers.

The wire name for the encoded image is ``image_data``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ArtworkBase(BaseModel):
    """Fields shared by stored records and new submissions.

    Attributes:
        title: Artwork title.
        description: Optional free-text description.
        artist: Optional artist name.
        tags: Ordered tag tokens as typed by the user.  Duplicates are kept.
        image_data: Encoded image string (``data:`` URL).
    """

    title: str = Field(
        ...,
        description="Artwork title.",
    )
    description: str | None = Field(
        default=None,
        description="Optional description.",
    )
    artist: str | None = Field(
        default=None,
        description="Optional artist name.",
    )
    tags: list[str] = Field(
        default_factory=list,
        description="Tag tokens in insertion order.",
    )
    image_data: str = Field(
        ...,
        description="Self-contained encoded image string.",
    )


class ArtworkCreate(ArtworkBase):
    """Request body for ``POST /api/art``.

    Title and image must be non-empty.  Nothing else is checked locally;
    any further rules belong to the store and show up as a failed status.
    """

    title: str = Field(
        ...,
        min_length=1,
        description="Artwork title.",
    )
    image_data: str = Field(
        ...,
        min_length=1,
        description="Self-contained encoded image string.",
    )

    def to_payload(self) -> dict:
        """Serialise for the POST body, leaving out absent optional fields."""
        return self.model_dump(exclude_none=True)


class ArtworkRecord(ArtworkBase):
    """One artwork held by the remote store.

    Records are taken as the store sends them.  The store guarantees a
    title and an image, so neither is re-checked here.

    Attributes:
        id: Opaque identifier assigned by the store.  Some stores use
            integers, others strings; both are accepted as-is.
    """

    id: str | int = Field(
        ...,
        description="Store-assigned identifier.",
    )
