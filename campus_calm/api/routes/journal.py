import json
from fastapi import APIRouter, Depends, Query
from sqlalchemy import func
from sqlalchemy.orm import Session

from ...core.db import get_db
from ..deps import get_completion_client, get_current_user_id
from ..schemas import (
    JournalAnalysisRequest, JournalAnalysisResponse, JournalInsightRequest, JournalInsightResponse,
    JournalEntryIn, JournalEntryOut, JournalStats, MoodChartPoint,
)
from ...llm.analyzer import analyze_entry, clean_emotions
from ...llm.insights import reflect_on_entry
from ...llm.openai_client import CompletionClient
from ...models import JournalEntry
from ...utils.dates import iso_z, weekday_short, us_date

router = APIRouter(tags=["journal"])

CHART_POINTS = 7

def _entry_out(e: JournalEntry) -> JournalEntryOut:
    return JournalEntryOut(
        id=e.id,
        content=e.content,
        mood=e.mood,
        moodLabel=e.mood_label,
        emotions=e.emotions,
        aiScore=e.ai_score,
        aiInsight=e.ai_insight,
        createdAt=iso_z(e.created_at),
    )

# AI endpoints always answer 200; failures degrade to a neutral result.

@router.post("/api/journal-analysis", response_model=JournalAnalysisResponse)
async def journal_analysis(payload: JournalAnalysisRequest, client: CompletionClient = Depends(get_completion_client)):
    analysis = await analyze_entry(client, payload.content)
    return JournalAnalysisResponse(**analysis.to_dict())

@router.post("/api/journal-insights", response_model=JournalInsightResponse)
async def journal_insights(payload: JournalInsightRequest, client: CompletionClient = Depends(get_completion_client)):
    insight = await reflect_on_entry(client, payload.content, payload.mood)
    return JournalInsightResponse(insight=insight)

@router.post("/journal/entries", response_model=JournalEntryOut)
def create_entry(payload: JournalEntryIn, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    e = JournalEntry(
        user_id=user_id,
        content=payload.content.strip(),
        mood=payload.mood,
        mood_label=payload.moodLabel,
        emotions_json=json.dumps(clean_emotions(payload.emotions)),
        ai_score=payload.aiScore,
        ai_insight=payload.aiInsight,
    )
    db.add(e)
    db.commit()
    db.refresh(e)
    return _entry_out(e)

@router.get("/journal/entries", response_model=list[JournalEntryOut])
def list_entries(limit: int | None = Query(None, ge=1, le=200), db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    q = db.query(JournalEntry).filter(JournalEntry.user_id == user_id).order_by(JournalEntry.created_at.desc())
    if limit:
        q = q.limit(limit)
    return [_entry_out(e) for e in q.all()]

@router.delete("/journal/entries/{entry_id}")
def delete_entry(entry_id: str, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    # scoped to the owner; someone else's id looks the same as a missing one
    e = db.query(JournalEntry).filter(JournalEntry.id == entry_id, JournalEntry.user_id == user_id).first()
    if not e:
        return {"ok": True}
    db.delete(e)
    db.commit()
    return {"ok": True}

@router.get("/journal/stats", response_model=JournalStats)
def stats(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    count, avg = db.query(func.count(JournalEntry.id), func.avg(JournalEntry.mood)).filter(JournalEntry.user_id == user_id).one()
    return JournalStats(count=count or 0, averageMood=round(float(avg), 2) if avg is not None else 0.0)

@router.get("/journal/mood-chart", response_model=list[MoodChartPoint])
def mood_chart(db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    recent = (
        db.query(JournalEntry)
        .filter(JournalEntry.user_id == user_id)
        .order_by(JournalEntry.created_at.desc())
        .limit(CHART_POINTS)
        .all()
    )
    return [
        MoodChartPoint(day=weekday_short(e.created_at), mood=e.ai_score or e.mood, date=us_date(e.created_at))
        for e in reversed(recent)
    ]
