"""Vintage Art & Craft Gallery - browse and upload artwork against a remote record store."""

__version__ = "0.1.0"

from vintagegallery.core.config import GalleryConfig
from vintagegallery.core.collection_store import CollectionStore
from vintagegallery.core.ingestion import ImageIngestionPipeline

__all__ = [
    "CollectionStore",
    "GalleryConfig",
    "ImageIngestionPipeline",
]
