import json
import uuid
from datetime import datetime
from sqlalchemy import String, DateTime, Text, Integer, Index
from sqlalchemy.orm import Mapped, mapped_column
from .core.db import Base

def _uuid() -> str:
    return str(uuid.uuid4())

# user_id is the auth provider's subject; users are not stored here.

class JournalEntry(Base):
    __tablename__ = "journal_entries"
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    user_id: Mapped[str] = mapped_column(String(64), index=True)
    content: Mapped[str] = mapped_column(Text)
    mood: Mapped[int] = mapped_column(Integer)  # 1-10, user-picked
    mood_label: Mapped[str | None] = mapped_column(String(40), nullable=True)
    emotions_json: Mapped[str] = mapped_column(Text, default="[]")
    ai_score: Mapped[int | None] = mapped_column(Integer, nullable=True)  # 1-10, from analysis
    ai_insight: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, index=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @property
    def emotions(self) -> list[str]:
        return json.loads(self.emotions_json or "[]")

class CopingActivity(Base):
    __tablename__ = "coping_activities"
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    user_id: Mapped[str] = mapped_column(String(64), index=True)
    activity_type: Mapped[str] = mapped_column(String(40))  # breathing/calming_audio/mood_journal/...
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, index=True)

Index("ix_journal_entries_user_created", JournalEntry.user_id, JournalEntry.created_at)
