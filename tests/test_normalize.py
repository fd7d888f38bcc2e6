import pytest

from faq.normalize import normalize, tokenize


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Do you offer 24/7 monitoring?", "do you offer 24 7 monitoring"),
        ("  MIXED   case\tand\nlines  ", "mixed case and lines"),
        ("law-enforcement liaison", "law enforcement liaison"),
        ("?!?!", ""),
        ("", ""),
        (None, ""),
        ("café", "caf"),
    ],
)
def test_normalize(raw, expected):
    assert normalize(raw) == expected


def test_normalize_coerces_non_strings():
    assert normalize(247) == "247"


def test_tokenize_drops_empty_tokens_and_keeps_order():
    assert tokenize(" Do you, do you?? ") == ["do", "you", "do", "you"]
    assert tokenize("...") == []
    assert tokenize(None) == []
