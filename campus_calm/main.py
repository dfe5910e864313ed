import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.db import engine, Base
from .core.log_config import setup_logging
from .llm.openai_client import CompletionClient
from .api.routes.chat import router as chat_router
from .api.routes.journal import router as journal_router
from .api.routes.activities import router as activities_router
from .api.routes.misc import router as misc_router

setup_logging()
log = logging.getLogger(__name__)

app = FastAPI(title="Campus Calm", version=settings.API_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup():
    Base.metadata.create_all(bind=engine)
    app.state.completion_client = CompletionClient.from_settings(settings)
    log.info("Campus Calm %s started (env=%s, model=%s)", settings.API_VERSION, settings.APP_ENV, settings.OPENAI_MODEL)

app.include_router(misc_router)
app.include_router(chat_router)
app.include_router(journal_router)
app.include_router(activities_router)
