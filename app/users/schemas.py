"""User Pydantic schemas"""
from uuid import UUID
from typing import Optional
from app.utils.schemas import CamelModel


class SignupRequest(CamelModel):
    """Request to register a new user. Presence is checked by the router."""
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    school: Optional[str] = None
    is_teacher: Optional[bool] = None


class SignupResponse(CamelModel):
    message: str
    user_id: UUID


class LoginRequest(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None


class LoginUser(CamelModel):
    """Minimal user projection returned on login (never the password hash)"""
    id: UUID
    name: str
    is_teacher: bool


class LoginResponse(CamelModel):
    message: str
    user: LoginUser
