"""Configuration loader for the FAQ assistant."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .catalog import FALLBACK_TEXT, default_knowledge_base
from .knowledge import KnowledgeBase, load_knowledge_base
from .matcher import MATCH_THRESHOLD, FaqMatcher


@dataclass(frozen=True)
class TranscriptConfig:
    max_messages: int


@dataclass(frozen=True)
class AssistantConfig:
    knowledge_base_path: Optional[Path]
    match_threshold: int
    fallback_text: str
    decision_log: bool
    transcript: TranscriptConfig

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AssistantConfig":
        kb_path = data.get("knowledge_base_path")
        transcript_data = data.get("transcript") or {}
        return cls(
            knowledge_base_path=Path(kb_path) if kb_path else None,
            match_threshold=int(data.get("match_threshold", MATCH_THRESHOLD)),
            fallback_text=data.get("fallback_text") or FALLBACK_TEXT,
            decision_log=_as_bool(data.get("decision_log", True)),
            transcript=TranscriptConfig(
                max_messages=int(transcript_data.get("max_messages", 50)),
            ),
        )


ENV_MAP = {
    "knowledge_base_path": "FAQ_KNOWLEDGE_BASE_PATH",
    "match_threshold": "FAQ_MATCH_THRESHOLD",
    "fallback_text": "FAQ_FALLBACK_TEXT",
    "decision_log": "FAQ_DECISION_LOG",
    "transcript.max_messages": "FAQ_TRANSCRIPT_MAX_MESSAGES",
}


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def merge_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
    merged = json.loads(json.dumps(config_data))  # deep copy via json

    for dotted_key, env_name in ENV_MAP.items():
        if env_name not in os.environ:
            continue
        value: Any = os.environ[env_name]
        target = merged
        parts = dotted_key.split(".")
        for part in parts[:-1]:
            target = target.setdefault(part, {})
        last = parts[-1]
        if last in {"match_threshold", "max_messages"}:
            value = int(value)
        elif last == "decision_log":
            value = _as_bool(value)
        target[last] = value

    return merged


def load_config(config_path: str | Path = "config/assistant.defaults.yml") -> AssistantConfig:
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    data = load_yaml(path)
    data = merge_env_overrides(data)
    return AssistantConfig.from_dict(data)


def build_knowledge_base(config: AssistantConfig) -> KnowledgeBase:
    if config.knowledge_base_path is None:
        return default_knowledge_base()
    return load_knowledge_base(config.knowledge_base_path)


def build_matcher(config: AssistantConfig) -> FaqMatcher:
    return FaqMatcher(
        build_knowledge_base(config),
        threshold=config.match_threshold,
        fallback_text=config.fallback_text,
    )
