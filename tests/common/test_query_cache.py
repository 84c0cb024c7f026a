from meeting_attendance.common.query_cache import QueryCache


def test_read_through_loads_once():
    cache = QueryCache()
    calls = []

    def loader():
        calls.append(1)
        return ["a"]

    assert cache.get_or_load(("members",), loader) == ["a"]
    assert cache.get_or_load(("members",), loader) == ["a"]
    assert len(calls) == 1


def test_invalidate_only_drops_named_resource():
    cache = QueryCache()
    cache.get_or_load(("attendance", "event", "e1"), lambda: 1)
    cache.get_or_load(("attendance", "all"), lambda: 2)
    cache.get_or_load(("events",), lambda: 3)

    cache.invalidate("attendance")

    assert ("attendance", "event", "e1") not in cache
    assert ("attendance", "all") not in cache
    assert ("events",) in cache


def test_value_loaded_during_invalidation_is_not_cached():
    cache = QueryCache()

    def loader():
        cache.invalidate("members")
        return "stale"

    assert cache.get_or_load(("members",), loader) == "stale"
    assert ("members",) not in cache


def test_disabled_cache_always_loads():
    cache = QueryCache(enabled=False)
    calls = []

    cache.get_or_load(("members",), lambda: calls.append(1))
    cache.get_or_load(("members",), lambda: calls.append(1))

    assert len(calls) == 2
