from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from ...core.db import get_db
from ..deps import get_current_user_id
from ...models import CopingActivity
from ..schemas import ActivityIn, ActivityOut
from ...utils.dates import iso_z

router = APIRouter(prefix="/activities", tags=["activities"])

@router.post("", response_model=ActivityOut)
def log_activity(payload: ActivityIn, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    a = CopingActivity(user_id=user_id, activity_type=payload.activityType.strip().lower())
    db.add(a)
    db.commit()
    db.refresh(a)
    return ActivityOut(id=a.id, activityType=a.activity_type, createdAt=iso_z(a.created_at))

@router.get("", response_model=list[ActivityOut])
def list_activities(limit: int = Query(50, ge=1, le=200), db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    items = (
        db.query(CopingActivity)
        .filter(CopingActivity.user_id == user_id)
        .order_by(CopingActivity.created_at.desc())
        .limit(limit)
        .all()
    )
    return [ActivityOut(id=a.id, activityType=a.activity_type, createdAt=iso_z(a.created_at)) for a in items]
