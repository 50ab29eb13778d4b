"""Unit tests for gallery session management."""

from unittest.mock import AsyncMock, Mock

import pytest

from vintagegallery.api.client import ArtStoreClient
from vintagegallery.core.collection_store import CollectionStore
from vintagegallery.core.ingestion import ImageIngestionPipeline
from vintagegallery.ui.models import GallerySession, UploaderState
from vintagegallery.ui.state import cleanup_session, initialize_session
from vintagegallery.ui.uploader import UploadFormController


class TestInitializeSession:
    """Tests for initialize_session function."""

    def test_initialize_none_creates_new_session(self, test_config):
        result = initialize_session(None, test_config)

        assert isinstance(result, GallerySession)
        assert result.is_initialized()

    def test_components_are_wired_together(self, test_config):
        state = initialize_session(GallerySession(), test_config)

        assert isinstance(state.client, ArtStoreClient)
        assert isinstance(state.collection, CollectionStore)
        assert isinstance(state.pipeline, ImageIngestionPipeline)
        assert isinstance(state.uploader, UploadFormController)
        assert state.collection.client is state.client
        assert state.uploader.collection is state.collection
        assert state.uploader.pipeline is state.pipeline

    def test_config_is_passed_explicitly(self, test_config):
        state = initialize_session(None, test_config)

        assert state.client.url == "http://store.test/api/art"
        assert state.pipeline.config is test_config

    def test_initialized_session_returned_as_is(self, session, test_config):
        client = session.client

        result = initialize_session(session, test_config)

        assert result is session
        assert result.client is client

    def test_missing_component_filled_in(self, session, test_config):
        collection = session.collection
        session.uploader = None

        result = initialize_session(session, test_config)

        assert result.uploader is not None
        assert result.collection is collection

    def test_repr(self, session):
        assert repr(session) == "GallerySession(initialized=True, items=0, uploader=idle)"


class TestCleanupSession:
    """Tests for cleanup_session function."""

    @pytest.mark.asyncio
    async def test_cleanup_closes_client_and_clears(self, session):
        session.uploader.open()
        client = session.client
        client.aclose = AsyncMock()

        await cleanup_session(session)

        client.aclose.assert_awaited_once()
        assert not session.is_initialized()
        assert session.client is None
        assert session.uploader is None

    @pytest.mark.asyncio
    async def test_cleanup_closes_uploader(self, session):
        uploader = session.uploader
        uploader.open()

        await cleanup_session(session)

        assert uploader.state is UploaderState.IDLE

    @pytest.mark.asyncio
    async def test_cleanup_empty_session(self):
        state = GallerySession(uploader=None, client=None)
        await cleanup_session(state)
        assert state.client is None

    @pytest.mark.asyncio
    async def test_cleanup_with_mock_client(self):
        client = Mock()
        client.aclose = AsyncMock()
        state = GallerySession(client=client)

        await cleanup_session(state)

        client.aclose.assert_awaited_once()
