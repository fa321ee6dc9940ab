import threading

from bkspell.retrieval.cache import ResultCache


def test_get_missing_returns_none():
    cache = ResultCache(2)
    assert cache.get("nope") is None


def test_empty_result_is_a_hit():
    cache = ResultCache(2)
    cache.put("zzz", [])
    assert cache.get("zzz") == []


def test_evicts_earliest_inserted_not_least_recently_used():
    cache = ResultCache(2)
    cache.put("a", [1])
    cache.put("b", [2])
    assert cache.get("a") == [1]  # a read must not refresh "a"
    cache.put("c", [3])
    assert "a" not in cache
    assert cache.keys() == ["b", "c"]


def test_reinsert_keeps_slot_and_size():
    cache = ResultCache(2)
    cache.put("a", [1])
    cache.put("b", [2])
    cache.put("a", [9])
    assert len(cache) == 2
    assert cache.keys() == ["a", "b"]
    assert cache.get("a") == [9]


def test_zero_capacity_stores_nothing():
    cache = ResultCache(0)
    cache.put("a", [1])
    assert len(cache) == 0


def test_returned_lists_are_copies():
    cache = ResultCache(2)
    cache.put("a", [1, 2])
    cache.get("a").append(3)
    assert cache.get("a") == [1, 2]


def test_concurrent_puts_respect_capacity():
    cache = ResultCache(50)

    def worker(n):
        for i in range(200):
            cache.put(f"{n}-{i}", [i])

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(cache) == 50
