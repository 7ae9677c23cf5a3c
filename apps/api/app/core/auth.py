from __future__ import annotations

import logging
from dataclasses import dataclass

import jwt
from fastapi import Depends, HTTPException, Request

from app.core.config import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    email: str
    display_name: str | None = None


def _session_token(request: Request) -> str | None:
    for name in settings.session_cookie_names:
        token = request.cookies.get(name)
        if token:
            return token
    return None


def _decode_session(token: str) -> Identity | None:
    try:
        claims = jwt.decode(
            token,
            settings.session_secret,
            algorithms=[settings.session_algorithm],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError:
        logger.info("session token expired")
        return None
    except jwt.InvalidTokenError as exc:
        logger.warning("rejected session token: %s", exc.__class__.__name__)
        return None

    email = claims.get("email")
    if not isinstance(email, str) or not email.strip():
        logger.warning("session token has no email claim")
        return None
    name = claims.get("name")
    return Identity(email=email.strip().lower(), display_name=name if isinstance(name, str) else None)


def authenticate(request: Request) -> Identity | None:
    """
    Resolve the caller's verified identity from the request.

    In session mode the identity provider's signed session cookie is decoded
    with the server-held secret. In forwardauth mode a trusted proxy injects
    X-Forwarded-User (email). Never raises; every failure is None.
    """
    if settings.auth_mode == "forwardauth":
        email = request.headers.get("X-Forwarded-User")
        if not email or not email.strip():
            return None
        return Identity(email=email.strip().lower())

    if not settings.session_secret:
        logger.error("SESSION_SECRET is not configured; rejecting all sessions")
        return None

    token = _session_token(request)
    if token is None:
        return None
    return _decode_session(token)


def get_identity(request: Request) -> Identity | None:
    return authenticate(request)


def require_identity(identity: Identity | None = Depends(get_identity)) -> Identity:
    if identity is None:
        raise HTTPException(status_code=401, detail="Authentication required. Please sign in.")
    return identity
