from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Sequence

from .lexicon import Lexicon, SignalKind


@dataclass(frozen=True)
class Message:
    role: str
    content: str


@dataclass(frozen=True)
class ClassificationSignals:
    crisis: bool = False
    breathing_need: bool = False
    mood_journal_need: bool = False
    calming_audio_need: bool = False

    def to_dict(self) -> dict:
        return asdict(self)


def classify(kind: SignalKind, text: str | None, lexicon: Lexicon) -> bool:
    # plain substring containment; no word boundaries or negation
    if not text:
        return False
    t = text.lower()
    return any(phrase in t for phrase in lexicon.for_kind(kind))


def latest_user_message(messages: Sequence[Message]) -> Message | None:
    for m in reversed(messages):
        if m.role == "user":
            return m
    return None


def classify_turn(messages: Sequence[Message], lexicon: Lexicon) -> ClassificationSignals:
    """Signals for the newest user turn. Earlier turns never raise a flag."""
    latest = latest_user_message(messages)
    text = latest.content if latest else ""
    return ClassificationSignals(
        crisis=classify(SignalKind.CRISIS, text, lexicon),
        breathing_need=classify(SignalKind.BREATHING, text, lexicon),
        mood_journal_need=classify(SignalKind.MOOD_JOURNAL, text, lexicon),
        calming_audio_need=classify(SignalKind.CALMING_AUDIO, text, lexicon),
    )
