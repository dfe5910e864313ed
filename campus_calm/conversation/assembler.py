from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from .classifiers import Message


@dataclass(frozen=True)
class PromptPayload:
    system_instruction: str
    messages: Tuple[Message, ...]

    def to_chat_messages(self) -> List[Dict[str, str]]:
        out = [{"role": "system", "content": self.system_instruction}]
        out.extend({"role": m.role, "content": m.content} for m in self.messages)
        return out


def assemble(base_instruction: str, persona_fragment: str, history: Sequence[Message]) -> PromptPayload:
    # full history, original order; no windowing
    return PromptPayload(
        system_instruction=base_instruction + persona_fragment,
        messages=tuple(history),
    )
