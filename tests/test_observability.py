import pytest

from faq.matcher import MatchResult
from faq.observability import MatchLogRecord


def test_match_log_schema_roundtrip():
    result = MatchResult(
        text="Yes.",
        provenance="Matched FAQ: Do you offer 24/7 monitoring?",
        score=15,
        entry_id="monitoring-247",
    )
    record = MatchLogRecord.from_result("q-1", "24/7 monitoring?", result, latency_ms=0.4)

    payload = record.to_dict()

    assert payload["outcome"] == "matched"
    assert payload["entry_id"] == "monitoring-247"
    assert payload["query_length"] == len("24/7 monitoring?")


def test_fallback_record_has_no_entry():
    result = MatchResult(text="Try again.", provenance="Suggested topics", score=0)
    payload = MatchLogRecord.from_result("q-2", "", result, latency_ms=0.0).to_dict()

    assert payload["outcome"] == "fallback"
    assert payload["entry_id"] is None


def test_inconsistent_record_rejected():
    record = MatchLogRecord(
        query_id="q-3",
        outcome="fallback",
        entry_id="monitoring-247",
        score=9,
        provenance="Suggested topics",
        query_length=3,
        latency_ms=0.1,
    )

    with pytest.raises(ValueError, match="match log validation failed"):
        record.to_dict()


def test_unknown_outcome_rejected():
    record = MatchLogRecord(
        query_id="q-4",
        outcome="maybe",
        entry_id=None,
        score=0,
        provenance="Suggested topics",
        query_length=0,
        latency_ms=0.0,
    )

    with pytest.raises(ValueError):
        record.to_dict()
