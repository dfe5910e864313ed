from __future__ import annotations

import logging
from typing import Sequence

from .assembler import assemble
from .classifiers import Message, classify_turn, latest_user_message
from .lexicon import Lexicon
from .personas import resolve
from .shaper import ReplyResult, shape
from ..llm.openai_client import CompletionClient
from ..llm.prompts import SYSTEM

log = logging.getLogger(__name__)

CHAT_ERROR_MESSAGE = (
    "Failed to process message. Please try again in a moment. "
    "If you're in crisis, please call or text 988 for immediate support."
)


class EmptyConversation(ValueError):
    pass


async def handle_turn(
    client: CompletionClient,
    messages: Sequence[Message],
    persona: str | None,
    lexicon: Lexicon,
    temperature: float = 0.7,
    max_tokens: int | None = 1000,
) -> ReplyResult:
    """Run one chat turn.

    Classification and prompt assembly happen before the completion call and
    shaping after it. ``CompletionError`` from the client propagates; the
    caller owns the failure response.
    """
    if not messages or latest_user_message(messages) is None:
        raise EmptyConversation("conversation has no user message")

    signals = classify_turn(messages, lexicon)
    if signals.crisis:
        log.warning("crisis language detected in latest user message")

    payload = assemble(SYSTEM, resolve(persona), messages)
    text = await client.complete(
        payload.to_chat_messages(),
        temperature=temperature,
        max_tokens=max_tokens,
    )
    return shape(text, signals)
