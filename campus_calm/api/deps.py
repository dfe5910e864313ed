from functools import lru_cache
from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from ..core.config import settings
from ..core.security import user_id_from_token
from ..conversation.lexicon import Lexicon, load_lexicon
from ..llm.openai_client import CompletionClient

bearer = HTTPBearer(auto_error=False)

def get_completion_client(request: Request) -> CompletionClient:
    client = getattr(request.app.state, "completion_client", None)
    if client is None:
        client = CompletionClient.from_settings(settings)
        request.app.state.completion_client = client
    return client

@lru_cache(maxsize=1)
def _configured_lexicon() -> Lexicon:
    return load_lexicon(settings.KEYWORDS_FILE or None)

def get_lexicon() -> Lexicon:
    return _configured_lexicon()

def get_current_user_id(creds: HTTPAuthorizationCredentials = Depends(bearer)) -> str:
    if creds is None or not creds.credentials:
        raise HTTPException(status_code=401, detail="Missing Authorization Bearer token")
    try:
        return user_id_from_token(creds.credentials)
    except (JWTError, ValueError):
        raise HTTPException(status_code=401, detail="Invalid token")
