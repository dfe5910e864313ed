import logging
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from ..deps import get_completion_client, get_lexicon
from ..schemas import ChatRequest, ChatResponse, ErrorOut
from ...conversation.classifiers import Message
from ...conversation.lexicon import Lexicon
from ...conversation.orchestrator import handle_turn, EmptyConversation, CHAT_ERROR_MESSAGE
from ...core.config import settings
from ...llm.openai_client import CompletionClient, CompletionError

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])

@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={500: {"model": ErrorOut}, 504: {"model": ErrorOut}},
)
async def chat(
    payload: ChatRequest,
    client: CompletionClient = Depends(get_completion_client),
    lexicon: Lexicon = Depends(get_lexicon),
):
    messages = [Message(role=m.role, content=m.content) for m in payload.messages]
    persona = payload.userContext.persona if payload.userContext else None
    try:
        result = await handle_turn(
            client,
            messages,
            persona,
            lexicon,
            temperature=settings.CHAT_TEMPERATURE,
            max_tokens=settings.CHAT_MAX_TOKENS,
        )
    except EmptyConversation:
        raise HTTPException(status_code=422, detail="messages must include a user message")
    except CompletionError as e:
        log.error("chat completion failed: %s", e, exc_info=True)
        status = 504 if e.retryable else 500
        return JSONResponse(
            status_code=status,
            content=ErrorOut(error=CHAT_ERROR_MESSAGE, retryable=e.retryable).model_dump(),
        )
    return result.to_dict()
