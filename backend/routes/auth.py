# backend/routes/auth.py
import hmac
import logging
from typing import Optional
from fastapi import APIRouter, Cookie, HTTPException, Response, status
from pydantic import BaseModel

from config import settings
from utils.tokenJWT import ADMIN_COOKIE_NAME, create_admin_token, is_admin_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


class AdminLogin(BaseModel):
    password: str


# Exchange the shared admin password for a session cookie
@router.post("/login")
def login(payload: AdminLogin, response: Response):
    if not hmac.compare_digest(payload.password.encode(), settings.ADMIN_PASSWORD.encode()):
        logger.warning("Admin login failed")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid password")

    response.set_cookie(
        key=ADMIN_COOKIE_NAME,
        value=create_admin_token(),
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="strict",
        max_age=settings.ADMIN_SESSION_HOURS * 60 * 60,
        path="/",
    )
    return {"success": True}


@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(key=ADMIN_COOKIE_NAME, path="/")
    return {"success": True}


# Report whether the caller holds a valid admin session
@router.get("/session")
def session(admin_session: Optional[str] = Cookie(None)):
    return {"authenticated": is_admin_token(admin_session)}
