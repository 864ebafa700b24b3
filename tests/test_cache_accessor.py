"""
Tests for the cache-aside accessor.
"""

import pytest

from article_cache.entities import ABSENT, Hit
from article_cache.services import CacheAccessor
from article_cache.services.cache_accessor import delete, read, write


@pytest.mark.asyncio
async def test_read_missing_key_is_absent(cache):
    """An empty store yields ABSENT."""
    assert await cache.read("/articles") is ABSENT


@pytest.mark.asyncio
async def test_write_then_read(cache):
    """A written value is read back as a hit."""
    value = [{"id": 1, "title": "A"}]
    await cache.write("/articles", value)
    assert await cache.read("/articles") == Hit(value)


@pytest.mark.asyncio
async def test_read_is_idempotent(cache):
    """Two reads without an intervening write agree."""
    await cache.write("/articles/1", {"id": 1})
    first = await cache.read("/articles/1")
    second = await cache.read("/articles/1")
    assert first == second == Hit({"id": 1})

    assert await cache.read("/articles/2") is ABSENT
    assert await cache.read("/articles/2") is ABSENT


@pytest.mark.asyncio
async def test_delete_then_read(cache):
    """A deleted key reads as ABSENT."""
    await cache.write("/articles/5", {"id": 5})
    await cache.delete("/articles/5")
    assert await cache.read("/articles/5") is ABSENT


@pytest.mark.asyncio
async def test_delete_absent_key_is_noop(cache, store):
    """Deleting a missing key leaves the store unchanged."""
    await cache.write("/articles", [])
    await cache.delete("/articles/404")
    assert list(store.data) == ["/articles"]


@pytest.mark.asyncio
@pytest.mark.parametrize("value", [None, [], {}, 0, ""])
async def test_empty_values_are_hits(cache, value):
    """A present-but-empty entry is a hit, not a miss."""
    await cache.write("/articles", value)
    result = await cache.read("/articles")
    assert isinstance(result, Hit)
    assert result.value == value


@pytest.mark.asyncio
async def test_corrupt_entry_reads_as_absent(cache, store):
    """Undecodable entries are bypassed."""
    store.data["/articles"] = "{corrupt"
    assert await cache.read("/articles") is ABSENT


@pytest.mark.asyncio
async def test_write_overwrites(cache):
    """A second write replaces the first."""
    await cache.write("/articles/1", {"id": 1, "title": "old"})
    await cache.write("/articles/1", {"id": 1, "title": "new"})
    assert await cache.read("/articles/1") == Hit({"id": 1, "title": "new"})


@pytest.mark.asyncio
async def test_store_failure_on_write_propagates(cache, store):
    """Store errors are surfaced, not swallowed."""
    store.error = ConnectionError("store down")
    with pytest.raises(ConnectionError):
        await cache.write("/articles", [])


@pytest.mark.asyncio
async def test_module_functions_operate_on_bare_store(store):
    """read/write/delete work directly against a store."""
    await write(store, "/articles/9", {"id": 9})
    assert store.data["/articles/9"] == '{"id":9}'
    assert await read(store, "/articles/9") == Hit({"id": 9})
    await delete(store, "/articles/9")
    assert await read(store, "/articles/9") is ABSENT


def test_accessor_exposes_store(store):
    assert CacheAccessor(store).store is store
