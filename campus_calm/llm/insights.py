import logging

from .openai_client import CompletionClient, CompletionError
from .prompts import JOURNAL_INSIGHT_INSTRUCTIONS
from .analyzer import FALLBACK_INSIGHTS, MISSING_INSIGHTS

log = logging.getLogger(__name__)

async def reflect_on_entry(client: CompletionClient, content: str, mood: int | None) -> str:
    if not content or not content.strip():
        return FALLBACK_INSIGHTS
    mood_part = f" (Mood: {mood}/10)" if mood is not None else ""
    messages = [
        {"role": "system", "content": JOURNAL_INSIGHT_INSTRUCTIONS},
        {"role": "user", "content": f"Journal Entry{mood_part}:\n\n{content}\n\nProvide supportive insight on this journal entry."},
    ]
    try:
        text = await client.complete(messages, temperature=0.7, max_tokens=200)
    except CompletionError as e:
        log.warning("journal insight unavailable: %s", e)
        return FALLBACK_INSIGHTS
    return (text or "").strip() or MISSING_INSIGHTS
