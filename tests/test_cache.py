import pytest

from to_identifier.convert.cache import FifoCache


def test_cache_rejects_non_positive_capacity() -> None:
    with pytest.raises(ValueError):
        FifoCache(0)


def test_cache_get_and_put() -> None:
    cache: FifoCache[str, str] = FifoCache(2)
    assert cache.get("a") is None
    cache.put("a", "A")
    assert cache.get("a") == "A"
    assert "a" in cache
    assert len(cache) == 1


def test_cache_evicts_oldest_inserted_even_after_hit() -> None:
    cache: FifoCache[str, int] = FifoCache(3)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("c", 3)
    assert cache.get("a") == 1

    cache.put("d", 4)
    assert "a" not in cache
    assert cache.keys() == ["b", "c", "d"]
    assert len(cache) == 3


def test_cache_overwrite_keeps_position() -> None:
    cache: FifoCache[str, int] = FifoCache(2)
    cache.put("a", 1)
    cache.put("b", 2)
    cache.put("a", 10)
    assert cache.keys() == ["a", "b"]
    assert cache.get("a") == 10

    cache.put("c", 3)
    assert cache.keys() == ["b", "c"]
