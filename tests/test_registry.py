"""
Tests for the stat schema registry and its process-wide accessor.
"""

import threading

import pytest

from fantasy_bball.core.http import TransportError
from fantasy_bball.stats import (
    SchemaMismatchError,
    StatSchemaRegistry,
    get_registry,
    is_stat_valid,
    load_registry,
    reset_registry,
    set_registry,
)

from .conftest import REFERENCE_PERSON_ID, TRADED_PERSON_ID


class TestStatSchemaRegistry:
    def test_index_is_order_of_first_appearance(self):
        registry = StatSchemaRegistry.from_total({"ppg": "1", "rpg": "2", "td3": "0"})
        assert registry.mapping == {"ppg": 0, "rpg": 1, "td3": 2}
        assert registry.names == ("ppg", "rpg", "td3")
        assert len(registry) == 3

    def test_duplicates_keep_first_slot(self):
        registry = StatSchemaRegistry(["ppg", "rpg", "ppg"])
        assert registry.names == ("ppg", "rpg")

    def test_is_valid(self):
        registry = StatSchemaRegistry(["ppg"])
        assert registry.is_valid("ppg")
        assert "ppg" in registry
        assert not registry.is_valid("nonexistent_stat")

    def test_index_of_is_strict(self):
        registry = StatSchemaRegistry(["ppg"])
        with pytest.raises(SchemaMismatchError) as exc:
            registry.index_of("nonexistent_stat")
        assert exc.value.stat == "nonexistent_stat"
        assert isinstance(exc.value, KeyError)

    def test_mapping_is_read_only(self):
        registry = StatSchemaRegistry(["ppg"])
        with pytest.raises(TypeError):
            registry.mapping["rpg"] = 1

    def test_equality(self):
        assert StatSchemaRegistry(["a", "b"]) == StatSchemaRegistry(["a", "b"])
        assert StatSchemaRegistry(["a", "b"]) != StatSchemaRegistry(["b", "a"])


class TestLoadRegistry:
    def test_built_from_reference_player(self, client):
        registry = load_registry(client)
        assert registry.names[:3] == ("ppg", "rpg", "apg")
        assert len(registry) == 11

    def test_reference_player_can_be_overridden(self, client, server):
        load_registry(client, person_id=TRADED_PERSON_ID)
        assert server.hits(TRADED_PERSON_ID) == 1
        assert server.hits(REFERENCE_PERSON_ID) == 0

    def test_two_builds_are_identical(self, client):
        assert load_registry(client).mapping == load_registry(client).mapping


class TestGetRegistry:
    def test_cached_after_first_build(self, client, server):
        first = get_registry(client)
        second = get_registry(client)
        assert first is second
        assert server.hits(REFERENCE_PERSON_ID) == 1

    def test_failed_build_propagates_and_is_not_cached(self, client, server):
        reference = server.documents.pop(str(REFERENCE_PERSON_ID))
        with pytest.raises(TransportError):
            get_registry(client)
        assert not is_stat_valid("ppg")

        server.documents[str(REFERENCE_PERSON_ID)] = reference
        assert get_registry(client).is_valid("ppg")

    def test_concurrent_first_calls_build_once(self, client, server):
        results = []
        barrier = threading.Barrier(4)

        def worker():
            barrier.wait()
            results.append(get_registry(client))

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert server.hits(REFERENCE_PERSON_ID) == 1
        assert all(r is results[0] for r in results)

    def test_set_and_reset(self):
        registry = StatSchemaRegistry(["ppg"])
        set_registry(registry)
        assert get_registry() is registry
        reset_registry()
        assert not is_stat_valid("ppg")


class TestIsStatValid:
    def test_false_before_build(self):
        assert not is_stat_valid("ppg")

    def test_after_build(self, client):
        get_registry(client)
        assert is_stat_valid("ppg")
        assert is_stat_valid("td3")
        assert not is_stat_valid("nonexistent_stat")
