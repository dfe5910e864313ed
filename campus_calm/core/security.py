from jose import jwt
from .config import settings

# Access tokens come from the hosted auth provider (HS256, shared secret).
# This service never mints tokens for real users.

def decode_token(token: str) -> dict:
    return jwt.decode(
        token,
        settings.AUTH_JWT_SECRET,
        algorithms=["HS256"],
        audience=settings.AUTH_JWT_AUDIENCE,
        options={"verify_aud": True},
    )

def user_id_from_token(token: str) -> str:
    payload = decode_token(token)
    sub = payload.get("sub")
    if not sub:
        raise ValueError("token has no subject")
    return str(sub)
