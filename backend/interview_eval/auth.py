# backend/interview_eval/auth.py
# Caller identity from a bearer JWT.

import os
import pathlib
import logging
from typing import Optional
import jwt
from dotenv import load_dotenv

# load backend/.env
BASE_DIR = pathlib.Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=os.path.join(BASE_DIR, ".env"))

AUTH_JWT_SECRET = os.getenv("AUTH_JWT_SECRET")
AUTH_JWT_ALGORITHM = "HS256"

logger = logging.getLogger("interview-evaluator.auth")


def decode_caller_id(token: str) -> Optional[str]:
    """Return the token's subject (user id), or None if the token is not valid."""
    if not AUTH_JWT_SECRET:
        logger.error("AUTH_JWT_SECRET not set; rejecting all callers")
        return None
    try:
        payload = jwt.decode(token, AUTH_JWT_SECRET, algorithms=[AUTH_JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        return None
    except jwt.InvalidTokenError:
        return None
    user_id = payload.get("sub")
    # the id becomes a collection path segment
    if not isinstance(user_id, str) or not user_id or "." in user_id or "/" in user_id:
        return None
    return user_id


def caller_id_from_header(authorization: Optional[str]) -> Optional[str]:
    """Extract the caller's user id from an `Authorization: Bearer <jwt>` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return decode_caller_id(token.strip())
