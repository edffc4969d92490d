import logging
import secrets

from fastapi import APIRouter, HTTPException, Request, status

from app.api.deps import session_user
from app.core import config
from app.schemas.auth import LoginRequest, LoginResponse, OkResponse, SessionUser

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])

INVALID_CREDENTIALS = "Неверный логин или пароль"


def credentials_match(login: str, password: str) -> bool:
    """Exact match against the configured pair. Empty values never match."""
    if not (login and password and config.LOGIN and config.PASSWORD):
        return False
    login_ok = secrets.compare_digest(login.encode(), config.LOGIN.encode())
    password_ok = secrets.compare_digest(password.encode(), config.PASSWORD.encode())
    return login_ok and password_ok


@router.post("/login", response_model=LoginResponse)
async def login(credentials: LoginRequest, request: Request):
    """Check the login/password pair and open a session."""
    if not credentials_match(credentials.login, credentials.password):
        logger.info(f"Login rejected for '{credentials.login}'")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

    if config.AUTH_MODE == "server-session":
        request.session["user"] = credentials.login

    logger.info(f"Login accepted for '{credentials.login}'")
    return {"ok": True, "user": credentials.login}


@router.get("/me", response_model=SessionUser)
async def me(request: Request):
    """Report whether the session is still valid."""
    if config.AUTH_MODE == "client-flag-only":
        return {"user": None}

    user = session_user(request)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return {"user": user}


@router.post("/logout", response_model=OkResponse)
async def logout(request: Request):
    request.session.clear()
    return {"ok": True}
