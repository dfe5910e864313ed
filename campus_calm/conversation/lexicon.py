from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet, Mapping, Iterable

import yaml

DEFAULT_KEYWORDS_FILE = os.path.join(os.path.dirname(__file__), "..", "data", "keywords.yaml")


class SignalKind(str, Enum):
    CRISIS = "crisis"
    BREATHING = "breathing"
    MOOD_JOURNAL = "mood_journal"
    CALMING_AUDIO = "calming_audio"


@dataclass(frozen=True)
class Lexicon:
    """Lowercase phrase lists, one per signal kind."""

    phrases: Mapping[SignalKind, FrozenSet[str]]

    def for_kind(self, kind: SignalKind) -> FrozenSet[str]:
        return self.phrases.get(kind, frozenset())

    @classmethod
    def from_mapping(cls, data: Mapping[Any, Iterable[str]]) -> "Lexicon":
        phrases: Dict[SignalKind, FrozenSet[str]] = {}
        for kind in SignalKind:
            raw = data.get(kind.value) or []
            if isinstance(raw, str):
                raise ValueError(f"keyword list for {kind.value!r} must be a list, not a string")
            phrases[kind] = frozenset(str(p).strip().lower() for p in raw if str(p).strip())
        return cls(phrases)


def load_lexicon(path: str | None = None) -> Lexicon:
    path = path or DEFAULT_KEYWORDS_FILE
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping of signal kind -> phrases")
    unknown = set(data) - {k.value for k in SignalKind}
    if unknown:
        raise ValueError(f"{path}: unknown signal kinds {sorted(unknown)}")
    return Lexicon.from_mapping(data)
