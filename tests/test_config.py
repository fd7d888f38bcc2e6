from pathlib import Path

import pytest

from faq.catalog import FALLBACK_TEXT, SENTINEL_ENTRIES
from faq.config import AssistantConfig, build_matcher, load_config

REPO_ROOT = Path(__file__).parent.parent


def test_load_config_defaults(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("match_threshold: 5", encoding="utf-8")

    cfg = load_config(path)

    assert isinstance(cfg, AssistantConfig)
    assert cfg.match_threshold == 5
    assert cfg.knowledge_base_path is None
    assert cfg.fallback_text == FALLBACK_TEXT
    assert cfg.decision_log is True
    assert cfg.transcript.max_messages == 50


def test_env_overrides(monkeypatch, tmp_path):
    source = tmp_path / "config.yml"
    source.write_text("match_threshold: 4", encoding="utf-8")

    monkeypatch.setenv("FAQ_MATCH_THRESHOLD", "6")
    monkeypatch.setenv("FAQ_TRANSCRIPT_MAX_MESSAGES", "10")
    monkeypatch.setenv("FAQ_DECISION_LOG", "false")

    cfg = load_config(source)

    assert cfg.match_threshold == 6
    assert cfg.transcript.max_messages == 10
    assert cfg.decision_log is False


def test_bad_numeric_override(monkeypatch, tmp_path):
    source = tmp_path / "config.yml"
    source.write_text("{}", encoding="utf-8")
    monkeypatch.setenv("FAQ_MATCH_THRESHOLD", "four")

    with pytest.raises(ValueError):
        load_config(source)


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yml")


def test_shipped_defaults_build_catalog_matcher(monkeypatch):
    monkeypatch.chdir(REPO_ROOT)

    cfg = load_config()
    matcher = build_matcher(cfg)

    assert cfg.knowledge_base_path == Path("config/knowledge_base.json")
    assert matcher.threshold == 4
    assert matcher.knowledge_base.entries == SENTINEL_ENTRIES


def test_builtin_catalog_without_path(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("fallback_text: Ask about our services.", encoding="utf-8")

    matcher = build_matcher(load_config(path))

    assert matcher.knowledge_base.entries == SENTINEL_ENTRIES
    assert matcher.answer("what is the weather today").text == "Ask about our services."
