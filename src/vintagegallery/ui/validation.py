"""Validation utilities for uploader inputs."""

from .models import UploadDraft


def parse_tags(raw: str) -> list[str]:
    """Split comma-separated tag text into tokens.

    Tokens are whitespace-trimmed and empty ones dropped.  Order is kept
    and duplicates are not removed.

    Args:
        raw: Tag text as typed, e.g. ``" pottery, , hand-made ,ceramic"``

    Returns:
        List of tags, e.g. ``["pottery", "hand-made", "ceramic"]``
    """
    if not raw:
        return []
    return [token.strip() for token in raw.split(",") if token.strip()]


def is_submittable(draft: UploadDraft | None) -> bool:
    """Check the submit guard: a title and an attached image are required.

    Args:
        draft: Draft to check (None when the uploader is closed)

    Returns:
        True if the draft may be sent to the store
    """
    return draft is not None and bool(draft.title) and draft.has_image()


def optional_text(value: str) -> str | None:
    """Map empty form text to None so it is left out of the request."""
    return value or None
