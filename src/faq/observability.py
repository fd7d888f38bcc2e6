"""Match log schema enforcement."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from jsonschema import Draft7Validator

from .matcher import MatchResult

MATCH_LOG_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": [
        "query_id",
        "received_at",
        "outcome",
        "entry_id",
        "score",
        "provenance",
        "query_length",
        "latency_ms",
    ],
    "properties": {
        "query_id": {"type": "string"},
        "received_at": {"type": "string", "format": "date-time"},
        "outcome": {"type": "string", "enum": ["matched", "fallback"]},
        "entry_id": {"type": ["string", "null"]},
        "score": {"type": "integer", "minimum": 0},
        "provenance": {"type": "string"},
        "query_length": {"type": "integer", "minimum": 0},
        "latency_ms": {"type": "number", "minimum": 0},
    },
    "allOf": [
        {
            "if": {"properties": {"outcome": {"const": "fallback"}}},
            "then": {"properties": {"entry_id": {"type": "null"}, "score": {"const": 0}}},
        },
        {
            "if": {"properties": {"outcome": {"const": "matched"}}},
            "then": {"properties": {"entry_id": {"type": "string"}}},
        },
    ],
}

_validator = Draft7Validator(MATCH_LOG_SCHEMA)


def validate_match_log(payload: Dict[str, Any]) -> None:
    errors = sorted(_validator.iter_errors(payload), key=lambda e: list(e.path))
    if errors:
        messages = ", ".join(error.message for error in errors)
        raise ValueError(f"match log validation failed: {messages}")


@dataclass
class MatchLogRecord:
    query_id: str
    outcome: str
    entry_id: Optional[str]
    score: int
    provenance: str
    query_length: int
    latency_ms: float
    received_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    @classmethod
    def from_result(
        cls, query_id: str, query: str, result: MatchResult, latency_ms: float
    ) -> "MatchLogRecord":
        return cls(
            query_id=query_id,
            outcome="matched" if result.matched else "fallback",
            entry_id=result.entry_id,
            score=result.score,
            provenance=result.provenance,
            query_length=len(query),
            latency_ms=latency_ms,
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = {
            "query_id": self.query_id,
            "received_at": self.received_at,
            "outcome": self.outcome,
            "entry_id": self.entry_id,
            "score": self.score,
            "provenance": self.provenance,
            "query_length": self.query_length,
            "latency_ms": self.latency_ms,
        }
        validate_match_log(payload)
        return payload
