"""
Operator session endpoints

gloverse_hq/api/v1/auth.py

"""
from typing import Optional
from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from gloverse_hq.core.security import authenticate_operator
from gloverse_hq.core.session import (
    DASHBOARD_PATH, LOGIN_PATH, clear_session_cookie, has_session, set_session_cookie
)
import logging


logger = logging.getLogger(__name__)

router = APIRouter()

class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

class SessionStatus(BaseModel):
    authenticated: bool


async def _read_credentials(request: Request) -> LoginRequest:
    """Accept the login form as urlencoded/multipart form data or JSON"""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {}
    else:
        form = await request.form()
        payload = {"email": form.get("email"), "password": form.get("password")}
    return LoginRequest(
        email=payload.get("email") if isinstance(payload.get("email"), str) else None,
        password=payload.get("password") if isinstance(payload.get("password"), str) else None,
    )


@router.post("/login")
async def login(request: Request):
    """Sign the operator in and issue the session cookie"""
    credentials = await _read_credentials(request)

    if not authenticate_operator(credentials.email, credentials.password):
        logger.warning("Rejected operator login attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password."
        )

    response = JSONResponse(content={"message": "Signed in", "redirect": DASHBOARD_PATH})
    set_session_cookie(response)
    logger.info("Operator signed in")
    return response


@router.post("/logout")
async def logout():
    """Drop the session cookie"""
    response = JSONResponse(content={"message": "Signed out", "redirect": LOGIN_PATH})
    clear_session_cookie(response)
    return response


@router.get("/session", response_model=SessionStatus)
async def session_status(request: Request):
    return SessionStatus(authenticated=has_session(request))
