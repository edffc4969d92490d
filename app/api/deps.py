from fastapi import HTTPException, Request, status

from app.core import config


def session_user(request: Request):
    """User stored in the signed session cookie, if any."""
    return request.session.get("user")


def require_auth(request: Request):
    """Board routes need a live session unless the deployment trusts the client flag."""
    if config.AUTH_MODE == "client-flag-only":
        return None

    user = session_user(request)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return user
