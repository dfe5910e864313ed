from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Literal

class ChatMessageIn(BaseModel):
    role: Literal["user", "assistant"]
    content: str

class UserContext(BaseModel):
    # Unknown keys are dropped. persona stays a plain string so that an
    # unrecognised value means "no persona" rather than a 422.
    model_config = ConfigDict(extra="ignore")

    persona: Optional[str] = None
    name: Optional[str] = None
    recentMood: Optional[str] = None

class ChatRequest(BaseModel):
    messages: List[ChatMessageIn] = Field(min_length=1)
    userContext: Optional[UserContext] = None

class SuggestionsOut(BaseModel):
    breathingExercise: bool
    moodJournal: bool
    calmingAudio: bool

class ChatResponse(BaseModel):
    content: str
    crisisDetected: bool
    crisisLevel: Literal["none", "critical"]
    suggestions: SuggestionsOut

class ErrorOut(BaseModel):
    error: str
    retryable: bool = False

class JournalAnalysisRequest(BaseModel):
    content: str = ""

class JournalAnalysisResponse(BaseModel):
    score: int = Field(ge=1, le=10)
    emotions: List[str]
    insights: str

class JournalInsightRequest(BaseModel):
    content: str = ""
    mood: Optional[int] = Field(default=None, ge=1, le=10)

class JournalInsightResponse(BaseModel):
    insight: str

class JournalEntryIn(BaseModel):
    content: str = Field(min_length=1)
    mood: int = Field(ge=1, le=10)
    moodLabel: Optional[str] = Field(default=None, max_length=40)
    emotions: List[str] = Field(default_factory=list)
    aiScore: Optional[int] = Field(default=None, ge=1, le=10)
    aiInsight: Optional[str] = None

class JournalEntryOut(BaseModel):
    id: str
    content: str
    mood: int
    moodLabel: Optional[str] = None
    emotions: List[str]
    aiScore: Optional[int] = None
    aiInsight: Optional[str] = None
    createdAt: str

class JournalStats(BaseModel):
    count: int
    averageMood: float

class MoodChartPoint(BaseModel):
    day: str
    mood: int
    date: str

class ActivityIn(BaseModel):
    activityType: str = Field(min_length=1, max_length=40)

class ActivityOut(BaseModel):
    id: str
    activityType: str
    createdAt: str
