"""Tests for the in-memory log store."""

import re
import threading
from unittest import mock

import pytest

from log_api.models import ValidationError
from log_api.store import LogStore


def _log(i, level="info", source="svc-a"):
    return {"level": level, "message": f"line-{i}", "source": source}


class TestAdmit:
    def test_assigns_id_and_received_at(self, store, sample_log):
        record = store.admit(sample_log)
        assert re.fullmatch(r"rec_[a-z0-9]{7}", record.id)
        assert record.received_at.endswith("Z")
        assert store.stats().last_received_at == record.received_at

    def test_preserves_extra_fields(self, store, sample_log):
        doc = store.admit(sample_log).to_dict()
        assert doc["transaction"] == {"id": "txn_abc1234", "currency": "USD"}
        assert doc["source"] == "payment-service"

    def test_reserved_fields_are_overwritten(self, store):
        record = store.admit({"level": "info", "message": "x", "id": "client-id", "received_at": "never"})
        doc = record.to_dict()
        assert doc["id"] == record.id != "client-id"
        assert doc["received_at"] == record.received_at

    def test_source_omitted_when_absent(self, store):
        doc = store.admit({"level": "warn", "message": "no source"}).to_dict()
        assert "source" not in doc

    def test_explicit_null_source_preserved(self, store):
        record = store.admit({"level": "info", "message": "m", "source": None})
        doc = record.to_dict()
        assert "source" in doc
        assert doc["source"] is None
        assert sorted(doc) == ["id", "level", "message", "received_at", "source"]

    def test_newest_first(self, store):
        for i in range(3):
            store.admit(_log(i))
        page = store.list()
        assert [r.message for r in page.records] == ["line-2", "line-1", "line-0"]

    @pytest.mark.parametrize("payload", [
        {"message": "x"},
        {"level": "info"},
        {"level": "", "message": "x"},
        {"level": "info", "message": ""},
        None,
        ["level", "message"],
    ])
    def test_missing_required_fields_rejected(self, store, payload):
        with pytest.raises(ValidationError) as exc:
            store.admit(payload)
        assert exc.value.message == "Missing required fields: level and message"
        assert store.stats().total_received == 0
        assert store.current_size == 0

    def test_ids_unique_among_live_records(self, store):
        ids = {store.admit(_log(i)).id for i in range(500)}
        assert len(ids) == 500

    def test_colliding_id_is_redrawn(self, store):
        draws = iter([list("aaaaaaa"), list("aaaaaaa"), list("bbbbbbb")])
        with mock.patch("log_api.store.random.choices", side_effect=lambda *a, **kw: next(draws)):
            first = store.admit(_log(0))
            second = store.admit(_log(1))
        assert first.id == "rec_aaaaaaa"
        assert second.id == "rec_bbbbbbb"

    def test_evicted_id_can_be_reused(self):
        store = LogStore(max_size=1)
        with mock.patch("log_api.store.random.choices", return_value=list("aaaaaaa")):
            store.admit(_log(0))
            record = store.admit(_log(1))
        assert record.id == "rec_aaaaaaa"
        assert [r.message for r in store.list().records] == ["line-1"]


class TestEviction:
    def test_window_capped_at_capacity(self):
        store = LogStore()
        for i in range(1, 1101):
            store.admit(_log(i))
            assert store.current_size == min(i, 1000)

        stats = store.stats()
        assert stats.total_received == 1100
        assert stats.total_logs == 1000

        records = store.list(limit=1000).records
        assert records[0].message == "line-1100"
        assert records[-1].message == "line-101"
        assert [r.message for r in records] == [f"line-{i}" for i in range(1100, 100, -1)]

    def test_small_capacity(self):
        store = LogStore(max_size=3)
        for i in range(5):
            store.admit(_log(i))
        assert [r.message for r in store.list().records] == ["line-4", "line-3", "line-2"]
        assert store.stats().total_received == 5

    def test_counters_not_decremented_by_eviction(self):
        store = LogStore(max_size=2)
        for i in range(4):
            store.admit(_log(i, level="error"))
        assert store.stats().by_level["error"] == 4


class TestLevelCounters:
    def test_counts_per_level(self, store):
        levels = ["debug"] * 5 + ["info"] * 3 + ["warn"] * 2 + ["error"]
        for i, level in enumerate(levels):
            store.admit(_log(i, level=level))
        assert store.stats().by_level == {"debug": 5, "info": 3, "warn": 2, "error": 1}

    def test_custom_level_gets_own_bucket(self, store):
        store.admit(_log(0, level="critical"))
        store.admit(_log(1, level="critical"))
        by_level = store.stats().by_level
        assert by_level["critical"] == 2
        assert by_level["error"] == 0


class TestList:
    def test_defaults(self, store):
        for i in range(60):
            store.admit(_log(i))
        page = store.list()
        assert len(page.records) == 50
        assert page.records[0].message == "line-59"
        assert page.total == 60
        assert page.limit == 50
        assert page.offset == 0
        assert page.has_more is True

    def test_no_more_when_window_small(self, store):
        for i in range(50):
            store.admit(_log(i))
        assert store.list().has_more is False

    def test_level_filter(self, store):
        for i in range(30):
            store.admit(_log(i, level="error" if i % 3 == 0 else "info"))
        page = store.list(level="error", limit=4)
        assert len(page.records) == 4
        assert all(r.level == "error" for r in page.records)
        assert page.total == 10
        assert [r.message for r in page.records] == ["line-27", "line-24", "line-21", "line-18"]

    def test_source_filter_applies_after_level(self, store):
        store.admit(_log(0, level="error", source="billing"))
        store.admit(_log(1, level="info", source="billing"))
        store.admit(_log(2, level="error", source="auth"))
        page = store.list(level="error", source="billing")
        assert [r.message for r in page.records] == ["line-0"]
        assert page.total == 1

    def test_offset_pagination(self, store):
        for i in range(10):
            store.admit(_log(i))
        page = store.list(limit=3, offset=6)
        assert [r.message for r in page.records] == ["line-3", "line-2", "line-1"]
        assert page.has_more is True
        last = store.list(limit=3, offset=9)
        assert [r.message for r in last.records] == ["line-0"]
        assert last.has_more is False

    def test_out_of_range_offset_is_empty(self, store):
        store.admit(_log(0))
        page = store.list(offset=500)
        assert page.records == []
        assert page.total == 1
        assert page.has_more is False

    def test_negative_values_use_defaults(self, store):
        store.admit(_log(0))
        page = store.list(limit=-1, offset=-5)
        assert page.limit == 50
        assert page.offset == 0
        assert len(page.records) == 1


class TestSearch:
    def test_case_insensitive(self, store):
        store.admit({"level": "info", "message": "Payment of $50 completed"})
        store.admit({"level": "info", "message": "Refund processed"})
        result = store.search("PAYMENT")
        assert result.total == 1
        assert result.results[0].message == "Payment of $50 completed"

    def test_level_prefilter(self, store):
        store.admit({"level": "error", "message": "payment failed"})
        store.admit({"level": "info", "message": "payment ok"})
        result = store.search("payment", level="error")
        assert [r.message for r in result.results] == ["payment failed"]

    def test_results_capped_but_total_reported(self, store):
        for i in range(150):
            store.admit({"level": "info", "message": f"payment {i}"})
        result = store.search("payment")
        assert len(result.results) == 100
        assert result.total == 150
        assert result.results[0].message == "payment 149"

    @pytest.mark.parametrize("query", [None, ""])
    def test_query_required(self, store, query):
        with pytest.raises(ValidationError) as exc:
            store.search(query)
        assert exc.value.message == 'Query parameter "q" is required'


class TestStats:
    def test_empty(self, store):
        stats = store.stats()
        assert stats.total_received == 0
        assert stats.by_level == {"debug": 0, "info": 0, "warn": 0, "error": 0}
        assert stats.last_received_at is None
        assert stats.total_logs == 0
        assert stats.memory_bytes > 0
        assert stats.memory_usage.endswith(" MB")

    def test_idempotent(self, store):
        for i in range(5):
            store.admit(_log(i))
        first, second = store.stats(), store.stats()
        assert first.total_received == second.total_received
        assert first.by_level == second.by_level
        assert first.last_received_at == second.last_received_at
        assert first.total_logs == second.total_logs

    def test_snapshot_is_a_copy(self, store):
        snap = store.stats()
        snap.by_level["info"] = 99
        assert store.stats().by_level["info"] == 0


class TestClear:
    def test_returns_discarded_count_and_resets(self, store):
        for i in range(37):
            store.admit(_log(i, level="critical"))
        assert store.clear() == 37

        stats = store.stats()
        assert stats.total_received == 0
        assert stats.total_logs == 0
        assert stats.by_level == {"debug": 0, "info": 0, "warn": 0, "error": 0}
        assert stats.last_received_at is None

    def test_clear_empty_store(self, store):
        assert store.clear() == 0


class TestConcurrency:
    def test_parallel_admits_respect_cap(self):
        store = LogStore(max_size=1000)

        def worker(n):
            for i in range(300):
                store.admit(_log(i, source=f"w{n}"))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        stats = store.stats()
        assert stats.total_received == 2400
        assert stats.total_logs == 1000
        assert stats.by_level["info"] == 2400
        ids = [r.id for r in store.list(limit=1000).records]
        assert len(set(ids)) == 1000
