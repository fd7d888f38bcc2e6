from pathlib import Path

import pytest
import yaml

from faq.catalog import FALLBACK_TEXT, default_knowledge_base
from faq.matcher import FALLBACK_PROVENANCE, FaqMatcher

DATA_PATH = Path(__file__).parent / "tests_data" / "golden_match_cases.yaml"

REQUIRED_FIELDS = {"name", "input", "expected_outcome", "expected_entry", "reason"}

OUTCOMES = {"matched", "fallback"}

CASES = yaml.safe_load(DATA_PATH.read_text(encoding="utf-8"))


def test_golden_cases_cover_outcomes_and_fields():
    seen_outcomes = set()
    for case in CASES:
        assert REQUIRED_FIELDS.issubset(case.keys()), case["name"]
        assert case["expected_outcome"] in OUTCOMES
        seen_outcomes.add(case["expected_outcome"])

    assert OUTCOMES.issubset(seen_outcomes), "Golden cases must cover every outcome"


@pytest.mark.parametrize("case", CASES, ids=[case["name"] for case in CASES])
def test_matcher_against_golden_cases(case):
    kb = default_knowledge_base()
    matcher = FaqMatcher(kb)

    result = matcher.answer(case["input"])

    if case["expected_outcome"] == "matched":
        entry = kb.get(case["expected_entry"])
        assert result.matched, f"expected a match for {case['name']}"
        assert result.entry_id == entry.id
        assert result.text == entry.answer
        assert result.provenance == f"Matched FAQ: {entry.question}"
        assert result.score >= 4
    else:
        assert not result.matched, f"expected fallback for {case['name']}"
        assert result.text == FALLBACK_TEXT
        assert result.provenance == FALLBACK_PROVENANCE
        assert result.score == 0
