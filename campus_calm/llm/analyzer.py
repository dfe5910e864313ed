from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, asdict
from typing import Any, List

from .openai_client import CompletionClient, CompletionError
from .prompts import JOURNAL_ANALYSIS_INSTRUCTIONS

log = logging.getLogger(__name__)

NEUTRAL_SCORE = 5
MIN_SCORE = 1
MAX_SCORE = 10
MAX_EMOTIONS = 4
MAX_EMOTION_LEN = 40

# returned when the service is unreachable or the entry is blank
FALLBACK_INSIGHTS = "Thank you for journaling. This is a meaningful step in understanding yourself better."
# returned when the service answered but left the insight out
MISSING_INSIGHTS = "Thank you for sharing your thoughts. Journaling is a valuable tool for self-reflection."


@dataclass
class JournalAnalysis:
    score: int = NEUTRAL_SCORE
    emotions: List[str] = field(default_factory=list)
    insights: str = FALLBACK_INSIGHTS

    def to_dict(self) -> dict:
        return asdict(self)


def clamp_score(raw: Any) -> int:
    """Coerce whatever the model sent into an integer in [1, 10].

    Missing, zero, boolean or non-numeric values fall back to the neutral 5.
    """
    if isinstance(raw, bool) or raw is None:
        return NEUTRAL_SCORE
    if isinstance(raw, int):
        # JSON ints are unbounded; compare before any float conversion
        if raw == 0:
            return NEUTRAL_SCORE
        return max(MIN_SCORE, min(MAX_SCORE, raw))
    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError):
        return NEUTRAL_SCORE
    if value != value or value in (float("inf"), float("-inf")):
        return NEUTRAL_SCORE
    if value == 0:
        return NEUTRAL_SCORE
    return max(MIN_SCORE, min(MAX_SCORE, int(round(value))))


def clean_emotions(raw: Any) -> List[str]:
    if not isinstance(raw, list):
        return []
    out: List[str] = []
    for item in raw:
        if not isinstance(item, str):
            continue
        label = item.strip().lower()[:MAX_EMOTION_LEN]
        if label and label not in out:
            out.append(label)
        if len(out) == MAX_EMOTIONS:
            break
    return out


def parse_analysis(raw: str | None) -> JournalAnalysis:
    try:
        data = json.loads(raw or "")
    except ValueError:
        log.warning("journal analysis was not valid JSON; using neutral result")
        return JournalAnalysis()
    if not isinstance(data, dict):
        return JournalAnalysis()
    insights = data.get("insights")
    if not isinstance(insights, str) or not insights.strip():
        insights = MISSING_INSIGHTS
    return JournalAnalysis(
        score=clamp_score(data.get("score")),
        emotions=clean_emotions(data.get("emotions")),
        insights=insights.strip(),
    )


async def analyze_entry(client: CompletionClient, content: str) -> JournalAnalysis:
    if not content or not content.strip():
        return JournalAnalysis()
    messages = [
        {"role": "system", "content": JOURNAL_ANALYSIS_INSTRUCTIONS},
        {"role": "user", "content": f"Analyze this journal entry:\n\n{content}"},
    ]
    try:
        raw = await client.complete(
            messages,
            temperature=0.7,
            max_tokens=300,
            response_format={"type": "json_object"},
        )
    except CompletionError as e:
        # journaling must never block on the AI being down
        log.warning("journal analysis unavailable, returning neutral result: %s", e)
        return JournalAnalysis()
    try:
        return parse_analysis(raw)
    except Exception as e:
        # model output is untrusted; any parse failure degrades like an outage
        log.warning("journal analysis could not be parsed, returning neutral result: %r", e)
        return JournalAnalysis()
