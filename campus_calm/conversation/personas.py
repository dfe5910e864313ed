from __future__ import annotations

from enum import Enum
from typing import Dict


class Persona(str, Enum):
    GENTLE = "gentle"
    DIRECT = "direct"
    HUMOROUS = "humorous"


PERSONA_FRAGMENTS: Dict[Persona, str] = {
    Persona.GENTLE: (
        "\n\nCommunication style: gentle. Speak softly and patiently. "
        "Lead with validation, use warm reassuring language, and never rush the student toward solutions."
    ),
    Persona.DIRECT: (
        "\n\nCommunication style: direct. Be clear and concise. "
        "Name what you notice plainly and offer concrete, practical next steps without excessive cushioning."
    ),
    Persona.HUMOROUS: (
        "\n\nCommunication style: light-hearted. Use gentle, kind humor where it fits to lift the mood, "
        "but drop the jokes entirely when the student is distressed or talks about safety."
    ),
}


def parse_persona(persona_id: str | None) -> Persona | None:
    if not isinstance(persona_id, str):
        return None
    try:
        return Persona(persona_id.strip().lower())
    except ValueError:
        return None


def resolve(persona_id: str | None) -> str:
    persona = parse_persona(persona_id)
    if persona is None:
        return ""
    return PERSONA_FRAGMENTS[persona]
