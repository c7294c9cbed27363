"""
Account endpoints - registration and login issue the bearer token the API consumes.
"""

import logging

from fastapi import APIRouter, status

from app.core.dependencies import CurrentUser
from app.core.errors import AuthError, ConflictError
from app.core.security import create_access_token, hash_password, verify_password
from app.db.models.user import User
from app.db.repositories.user_repository import UserRepository
from app.db.session import DbSession
from app.schemas.user import AuthResponse, LoginRequest, RegisterRequest, UserResponse

router = APIRouter()
logger = logging.getLogger(__name__)


def _auth_response(user: User) -> AuthResponse:
    return AuthResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        token=create_access_token(user.id),
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(session: DbSession, data: RegisterRequest):
    """Create new user and return it with a token. Never returns the password hash."""
    repo = UserRepository(session)
    email = data.email.lower()
    if await repo.get_by_email(email):
        raise ConflictError("Email already registered")
    user = User(
        name=data.name.strip(),
        email=email,
        hashed_password=hash_password(data.password),
    )
    user = await repo.add(user)
    logger.info("user registered: id=%s", user.id)
    return _auth_response(user)


@router.post("/login", response_model=AuthResponse)
async def login(session: DbSession, data: LoginRequest):
    """Authenticate and return a JWT."""
    repo = UserRepository(session)
    user = await repo.get_by_email(data.email.lower())
    if not user or not user.is_active or not verify_password(data.password, user.hashed_password):
        logger.info("login rejected for %s", data.email)
        raise AuthError(AuthError.BAD_CREDENTIALS, "Invalid email or password")
    return _auth_response(user)


@router.get("/me", response_model=UserResponse)
async def me(user: CurrentUser):
    return UserResponse(id=user.id, name=user.name, email=user.email)
