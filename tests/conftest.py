"""Shared pytest fixtures for gallery tests."""

import base64
import io
import json
import shutil
import tempfile
from pathlib import Path
from typing import Generator

import httpx
import pytest
from PIL import Image

from vintagegallery.api.client import ArtStoreClient
from vintagegallery.core.collection_store import CollectionStore
from vintagegallery.core.config import GalleryConfig
from vintagegallery.core.ingestion import ImageIngestionPipeline
from vintagegallery.ui.models import GallerySession
from vintagegallery.ui.state import initialize_session
from vintagegallery.ui.uploader import UploadFormController

BACKEND_URL = "http://store.test"


class FakeArtStore:
    """In-memory stand-in for the remote record store.

    Serves ``GET /api/art`` from ``records`` and appends accepted ``POST``
    bodies to it.  Every request is recorded for assertions.
    """

    def __init__(self, records: list[dict] | None = None):
        self.records = list(records or [])
        self.requests: list[httpx.Request] = []
        self.posted: list[dict] = []
        self.get_status = 200
        self.post_status = 201
        self.get_error: Exception | None = None
        self.post_error: Exception | None = None

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    @property
    def calls(self) -> list[tuple[str, str]]:
        return [(request.method, request.url.path) for request in self.requests]

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.method == "GET":
            if self.get_error is not None:
                raise self.get_error
            if self.get_status != 200:
                return httpx.Response(self.get_status, json={"detail": "unavailable"})
            return httpx.Response(200, json=self.records)

        if request.method == "POST":
            if self.post_error is not None:
                raise self.post_error
            body = json.loads(request.content)
            self.posted.append(body)
            if not 200 <= self.post_status < 300:
                return httpx.Response(self.post_status, json={"detail": "rejected"})
            record = {"id": str(len(self.records) + 1), **body}
            self.records.append(record)
            return httpx.Response(self.post_status, json=record)

        return httpx.Response(405)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config() -> GalleryConfig:
    """Create a test configuration pointing at the fake store."""
    return GalleryConfig(_env_file=None, backend_url=BACKEND_URL)


@pytest.fixture
def png_bytes() -> bytes:
    """A tiny valid PNG image."""
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), color=(180, 83, 9)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def png_file(temp_dir: Path, png_bytes: bytes) -> Path:
    """A PNG image written to disk with a .png extension."""
    path = temp_dir / "vase.png"
    path.write_bytes(png_bytes)
    return path


@pytest.fixture
def png_data_url(png_bytes: bytes) -> str:
    """The PNG fixture as an encoded image string."""
    return "data:image/png;base64," + base64.b64encode(png_bytes).decode("ascii")


@pytest.fixture
def sample_records(png_data_url: str) -> list[dict]:
    """Records as the store would return them."""
    return [
        {
            "id": "1",
            "title": "Blue Vase",
            "artist": "M. Potter",
            "description": "Wheel-thrown stoneware",
            "tags": ["pottery", "ceramic"],
            "image_data": png_data_url,
        },
        {
            "id": "2",
            "title": "Quilt",
            "tags": [],
            "image_data": png_data_url,
        },
    ]


@pytest.fixture
def fake_store(sample_records: list[dict]) -> FakeArtStore:
    """Fake record store preloaded with the sample records."""
    return FakeArtStore(sample_records)


@pytest.fixture
def client(test_config: GalleryConfig, fake_store: FakeArtStore) -> ArtStoreClient:
    """Store client wired to the fake store."""
    return ArtStoreClient(test_config, transport=fake_store.transport)


@pytest.fixture
def collection(client: ArtStoreClient) -> CollectionStore:
    return CollectionStore(client)


@pytest.fixture
def pipeline(test_config: GalleryConfig) -> ImageIngestionPipeline:
    return ImageIngestionPipeline(test_config)


@pytest.fixture
def uploader(collection: CollectionStore, pipeline: ImageIngestionPipeline) -> UploadFormController:
    return UploadFormController(collection, pipeline)


@pytest.fixture
def session(test_config: GalleryConfig, fake_store: FakeArtStore) -> GallerySession:
    """Initialized gallery session talking to the fake store."""
    return initialize_session(GallerySession(), test_config, transport=fake_store.transport)
