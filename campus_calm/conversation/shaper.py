from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .classifiers import ClassificationSignals

FALLBACK_REPLY = "I'm here to listen. Could you tell me more?"

CRISIS_NONE = "none"
CRISIS_CRITICAL = "critical"


@dataclass(frozen=True)
class Suggestions:
    breathing_exercise: bool = False
    mood_journal: bool = False
    calming_audio: bool = False


@dataclass(frozen=True)
class ReplyResult:
    content: str
    crisis_detected: bool
    crisis_level: str
    suggestions: Suggestions

    def to_dict(self) -> Dict[str, Any]:
        # wire keys the chat client reads
        return {
            "content": self.content,
            "crisisDetected": self.crisis_detected,
            "crisisLevel": self.crisis_level,
            "suggestions": {
                "breathingExercise": self.suggestions.breathing_exercise,
                "moodJournal": self.suggestions.mood_journal,
                "calmingAudio": self.suggestions.calming_audio,
            },
        }


def shape(completion_text: str | None, signals: ClassificationSignals) -> ReplyResult:
    content = completion_text if completion_text and completion_text.strip() else FALLBACK_REPLY
    return ReplyResult(
        content=content,
        crisis_detected=signals.crisis,
        crisis_level=CRISIS_CRITICAL if signals.crisis else CRISIS_NONE,
        suggestions=Suggestions(
            breathing_exercise=signals.breathing_need,
            mood_journal=signals.mood_journal_need,
            calming_audio=signals.calming_audio_need,
        ),
    )
