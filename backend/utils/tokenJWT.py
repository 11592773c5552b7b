# utils/tokenJWT.py
from jose import jwt, JWTError
from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import Cookie, HTTPException, status

from config import settings

# Cookie holding the signed admin session
ADMIN_COOKIE_NAME = "admin_session"
ADMIN_SUBJECT = "admin"

# Generate a new signed admin session token
def create_access_token(data: dict, expires_delta: timedelta = None):
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(hours=settings.ADMIN_SESSION_HOURS))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def create_admin_token() -> str:
    return create_access_token({"sub": ADMIN_SUBJECT})

# True when the token is a valid, unexpired admin session
def is_admin_token(token: Optional[str]) -> bool:
    if not token:
        return False
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return False
    return payload.get("sub") == ADMIN_SUBJECT

# Dependency guarding admin-only routes
def require_admin(admin_session: Optional[str] = Cookie(None)):
    if not is_admin_token(admin_session):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Admin session required",
        )
    return True
