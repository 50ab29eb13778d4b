"""End-to-end upload scenarios against a fake record store.

These drive the real client, collection store, ingestion pipeline and
upload controller together; only the HTTP transport is faked.
"""

import pytest

from vintagegallery.ui.models import UploaderState

pytestmark = pytest.mark.integration


@pytest.mark.asyncio
async def test_startup_load_publishes_collection(session, fake_store):
    result = await session.collection.load()

    assert result.ok
    assert [record.title for record in session.collection.items] == ["Blue Vase", "Quilt"]
    assert session.collection.loading is False


@pytest.mark.asyncio
async def test_upload_blue_vase(session, fake_store, png_file):
    """Open, title, attach, submit: one POST with no tags, then a GET, then Idle."""
    fake_store.records = []
    uploader = session.uploader

    uploader.open()
    uploader.set_title("Blue Vase")
    assert await uploader.attach_image(png_file)
    result = await uploader.submit()

    assert result.ok
    assert fake_store.calls == [("POST", "/api/art"), ("GET", "/api/art")]
    assert fake_store.posted[0]["tags"] == []
    assert fake_store.posted[0]["image_data"].startswith("data:image/png;base64,")
    assert uploader.state is UploaderState.IDLE
    assert uploader.draft is None
    assert [record.title for record in session.collection.items] == ["Blue Vase"]


@pytest.mark.asyncio
async def test_duplicate_tags_are_submitted(session, fake_store, png_file):
    uploader = session.uploader

    uploader.open()
    uploader.set_title("Sampler")
    uploader.set_tags("a, b, a")
    await uploader.attach_image(png_file)
    await uploader.submit()

    assert fake_store.posted[0]["tags"] == ["a", "b", "a"]


@pytest.mark.asyncio
async def test_rejected_upload_can_be_fixed_and_retried(session, fake_store, png_file):
    uploader = session.uploader
    fake_store.post_status = 400

    uploader.open()
    uploader.set_title("Teapot")
    await uploader.attach_image(png_file)
    first = await uploader.submit()

    assert not first.ok
    assert uploader.state is UploaderState.EDITING
    assert fake_store.calls == [("POST", "/api/art")]

    fake_store.post_status = 201
    uploader.set_artist("J. Clay")
    second = await uploader.submit()

    assert second.ok
    assert fake_store.posted[-1]["artist"] == "J. Clay"
    assert session.collection.items[-1].title == "Teapot"


@pytest.mark.asyncio
async def test_unreadable_file_then_valid_file(session, fake_store, png_file, temp_dir):
    uploader = session.uploader
    uploader.open()
    uploader.set_title("Teapot")

    assert not await uploader.attach_image(temp_dir / "gone.png")
    assert await uploader.submit() is None
    assert fake_store.requests == []

    assert await uploader.attach_image(png_file)
    result = await uploader.submit()
    assert result.ok
