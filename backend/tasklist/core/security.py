from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlmodel.ext.asyncio.session import AsyncSession
from starlette.concurrency import run_in_threadpool

from .config import settings
from .errors import AuthenticationError
from tasklist.models import User
from tasklist.repositories import find_user_by_email
from tasklist.schemas.auth import TokenData

# Argon2 with a pinned work factor so hashes stay comparable across deploys.
ARGON2_ROUNDS = 3
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto", argon2__rounds=ARGON2_ROUNDS)

ALGORITHM = "HS256"
BEARER_PREFIX = "Bearer "


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Constant-time check; a stored value that is not a known hash never matches."""
    try:
        return pwd_context.verify(password, hashed)
    except (ValueError, TypeError):
        return False


# Verified against for unknown emails; built at import so no login pays for it.
DUMMY_HASH = pwd_context.hash("not-a-real-password")


def generate_token(user: User, secret: Optional[str] = None) -> str:
    """Sign {userId, email} for ``user``; expires ``jwt_expire_days`` after issue."""
    now = datetime.now(timezone.utc)
    exp = now + timedelta(days=settings.jwt_expire_days)

    payload = {
        "userId": user.id,
        "email": user.email,
        "exp": exp,
        "iat": now,
    }
    return jwt.encode(payload, secret or settings.signing_secret(), algorithm=ALGORITHM)


def verify_token(token: str, secret: Optional[str] = None) -> Optional[TokenData]:
    """
    Decode ``token`` and return its claims, or None.

    Every failure (expired, malformed, wrong signature, missing claims) yields
    None so callers cannot branch on the cause.
    """
    try:
        payload = jwt.decode(token, secret or settings.signing_secret(), algorithms=[ALGORITHM])
        return TokenData(user_id=int(payload["userId"]), email=payload["email"])
    except (JWTError, KeyError, ValueError, TypeError):
        return None


def extract_token_from_header(auth_header: Optional[str]) -> Optional[str]:
    """Only the case-sensitive ``Bearer <token>`` scheme is recognised."""
    if not auth_header or not auth_header.startswith(BEARER_PREFIX):
        return None
    token = auth_header[len(BEARER_PREFIX):]
    return token or None


async def authenticate_user(session: AsyncSession, email: str, password: str) -> User:
    """
    Return the user whose credentials match.

    Raises AuthenticationError with the same message whether the email is
    unknown or the password is wrong. An unknown email still pays for one
    hash verification so response time does not reveal which case it was.
    """
    user = await find_user_by_email(session, email)
    if user is None:
        await run_in_threadpool(verify_password, password, DUMMY_HASH)
        raise AuthenticationError()

    if not await run_in_threadpool(verify_password, password, user.password_hash):
        raise AuthenticationError()

    return user
