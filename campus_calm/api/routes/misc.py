from fastapi import APIRouter
from ...core.config import settings
from ...conversation.personas import Persona

router = APIRouter(tags=["misc"])

@router.get("/health")
def health():
    return {"ok": True}

@router.get("/version")
def version():
    return {"version": settings.API_VERSION}

@router.get("/config/app")
def app_config():
    return {
        "chatEnabled": True,
        "journalAnalysisEnabled": True,
        "personas": [p.value for p in Persona],
    }
