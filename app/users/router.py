"""Signup and login endpoints"""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.config import Settings, get_app_settings
from app.db.postgres import get_db
from app.exceptions import ValidationError, endpoint_errors
from app.users.service import UserService
from app.users.schemas import (
    SignupRequest,
    SignupResponse,
    LoginRequest,
    LoginResponse,
    LoginUser,
)

router = APIRouter(
    prefix="/api",
    tags=["users"],
)


@router.post("/signup", response_model=SignupResponse)
async def signup(
    request: SignupRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """
    Register a new student or teacher.

    Fails with 400 when name, email or password is missing, or when the
    email is already registered.
    """
    with endpoint_errors("Signup failed"):
        if not (request.name and request.email and request.password):
            raise ValidationError("Missing fields")

        service = UserService(db, settings.bcrypt_rounds)
        user = await service.signup(
            name=request.name,
            email=request.email,
            password=request.password,
            school=request.school,
            is_teacher=bool(request.is_teacher),
        )

    return SignupResponse(message="Signup successful", user_id=user.id)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """
    Check credentials and return a minimal user projection.

    No session or token is issued.
    """
    with endpoint_errors("Login failed"):
        if not (request.email and request.password):
            raise ValidationError("Missing fields")

        service = UserService(db, settings.bcrypt_rounds)
        user = await service.login(request.email, request.password)

    return LoginResponse(
        message="Login successful",
        user=LoginUser(id=user.id, name=user.name, is_teacher=user.is_teacher),
    )
