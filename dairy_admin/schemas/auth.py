from typing import Optional

from pydantic import BaseModel


class LoginRequest(BaseModel):
    username: str = ""
    password: str = ""


class SessionInfo(BaseModel):
    authenticated: bool
    username: Optional[str] = None
    isAdmin: Optional[bool] = None
