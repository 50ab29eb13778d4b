"""UI event handlers organized by feature area.

This package provides handlers for all Gradio UI events:
- gallery: Loading and rendering the artwork grid
- uploader: Draft editing, image attachment and submission
"""

from .gallery import (
    format_caption,
    gallery_status,
    load_gallery,
    render_gallery,
)
from .uploader import (
    attach_image,
    close_uploader,
    open_uploader,
    submit_upload,
    update_artist,
    update_description,
    update_tags,
    update_title,
)

__all__ = [
    # Gallery handlers
    "format_caption",
    "gallery_status",
    "load_gallery",
    "render_gallery",
    # Uploader handlers
    "attach_image",
    "close_uploader",
    "open_uploader",
    "submit_upload",
    "update_artist",
    "update_description",
    "update_tags",
    "update_title",
]
