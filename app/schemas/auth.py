from typing import Optional
from pydantic import BaseModel


class LoginRequest(BaseModel):
    login: str = ""
    password: str = ""


class LoginResponse(BaseModel):
    ok: bool
    user: str


class SessionUser(BaseModel):
    user: Optional[str] = None


class OkResponse(BaseModel):
    ok: bool = True
