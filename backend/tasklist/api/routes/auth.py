import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel.ext.asyncio.session import AsyncSession
from starlette.concurrency import run_in_threadpool

from tasklist.api.deps import get_current_user, get_session
from tasklist.core.errors import AuthenticationError, UniqueConstraintError
from tasklist.core.security import authenticate_user, generate_token, hash_password
from tasklist.models import User
from tasklist.repositories import create_user, find_user_by_email
from tasklist.schemas.auth import AuthOut, LoginIn, RegisterIn, UserOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthOut, status_code=201)
async def register(payload: RegisterIn, session: AsyncSession = Depends(get_session)):
    existing = await find_user_by_email(session, payload.email)
    if existing:
        raise HTTPException(
            status_code=400,
            detail="User with this email already exists"
        )

    password_hash = await run_in_threadpool(hash_password, payload.password)

    try:
        user = await create_user(session, payload.email, password_hash)
    except UniqueConstraintError:
        # Lost a race with a concurrent registration for the same email.
        raise HTTPException(
            status_code=400,
            detail="User with this email already exists"
        )

    logger.info("Registered user id=%s", user.id)
    return AuthOut(
        message="User registered successfully",
        user=UserOut.model_validate(user),
        token=generate_token(user),
    )


@router.post("/login", response_model=AuthOut)
async def login(payload: LoginIn, session: AsyncSession = Depends(get_session)):
    try:
        user = await authenticate_user(session, payload.email, payload.password)
    except AuthenticationError as exc:
        logger.info("Rejected login attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc)
        )

    return AuthOut(
        message="Login successful",
        user=UserOut.model_validate(user),
        token=generate_token(user),
    )


@router.get("/me", response_model=UserOut)
async def me(user: User = Depends(get_current_user)):
    return user
