"""
Cookie session gating for page routes

gloverse_hq/core/session.py

"""
import re
from fastapi import Request, Response
from fastapi.responses import RedirectResponse
from gloverse_hq.core.config import settings
from gloverse_hq.core.security import create_session_token, is_valid_session
import logging

logger = logging.getLogger(__name__)

LOGIN_PATH = "/login"
DASHBOARD_PATH = "/dashboard"

# API routes, framework internals and docs are never redirected
PASSTHROUGH_PREFIXES = ("/api", "/_next", "/graphql", "/docs", "/redoc", "/openapi.json", "/health")

STATIC_ASSET = re.compile(r"\.(.*)$")


def has_session(request: Request) -> bool:
    return is_valid_session(request.cookies.get(settings.SESSION_COOKIE_NAME))


def is_passthrough(path: str) -> bool:
    return path.startswith(PASSTHROUGH_PREFIXES) or STATIC_ASSET.search(path) is not None


async def session_gate(request: Request, call_next):
    """Redirect page requests according to the operator session"""
    path = request.url.path

    if is_passthrough(path):
        return await call_next(request)

    session = has_session(request)

    if path == LOGIN_PATH:
        if session:
            return RedirectResponse(url=DASHBOARD_PATH, status_code=307)
        return await call_next(request)

    if not session:
        logger.debug(f"No session for {path}, redirecting to login")
        return RedirectResponse(url=LOGIN_PATH, status_code=307)

    return await call_next(request)


def set_session_cookie(response: Response) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=create_session_token(),
        httponly=True,
        secure=settings.is_production,
        max_age=settings.SESSION_MAX_AGE_SECONDS,
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(key=settings.SESSION_COOKIE_NAME, path="/")
