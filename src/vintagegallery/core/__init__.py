"""Core gallery logic: configuration, ingestion and collection sync.

- **GalleryConfig**: Configuration management using Pydantic Settings
- **ImageIngestionPipeline**: Encodes files into self-contained image strings
- **CollectionStore**: In-memory record list synchronised with the remote store
- **Result** and the failure classes: explicit outcomes for the UI layer

Usage Example
-------------
    from vintagegallery.api.client import ArtStoreClient
    from vintagegallery.core import CollectionStore, GalleryConfig

    cfg = GalleryConfig(backend_url="http://localhost:8000")
    store = CollectionStore(ArtStoreClient(cfg))
    result = await store.load()
"""

from vintagegallery.core.config import GalleryConfig
from vintagegallery.core.errors import CreateFailure, GalleryError, LoadFailure, ReadFailure
from vintagegallery.core.ingestion import ImageIngestionPipeline, decode_image
from vintagegallery.core.results import Result
from vintagegallery.core.collection_store import CollectionStore

__all__ = [
    "CollectionStore",
    "CreateFailure",
    "GalleryConfig",
    "GalleryError",
    "ImageIngestionPipeline",
    "LoadFailure",
    "ReadFailure",
    "Result",
    "decode_image",
]
