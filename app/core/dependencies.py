"""
FastAPI dependencies - bearer authentication resolved to an explicit UserIdentity.
Every failure is an AuthError (401, generic message); the reason is only logged.
"""

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.errors import AuthError
from app.core.metrics import AUTHENTICATION_FAILURES
from app.core.security import decode_access_token
from app.db.repositories.user_repository import UserRepository
from app.db.session import DbSession
from app.schemas.user import UserIdentity

logger = logging.getLogger(__name__)

# auto_error=False: missing header or non-Bearer scheme yields None instead of FastAPI's own 403
security = HTTPBearer(auto_error=False)


def _reject(reason: str) -> AuthError:
    AUTHENTICATION_FAILURES.labels(reason=reason).inc()
    logger.info("authentication rejected: %s", reason)
    return AuthError(reason)


async def verify_token(session, token: str | None) -> UserIdentity:
    """Resolve a bearer token to the user it was issued for."""
    if not token:
        raise _reject(AuthError.NO_TOKEN)
    payload = decode_access_token(token)
    if not payload or not payload.get("sub"):
        raise _reject(AuthError.TOKEN_INVALID)
    row = await UserRepository(session).get_identity(str(payload["sub"]))
    if row is None or not row.is_active:
        raise _reject(AuthError.USER_NOT_FOUND)
    return UserIdentity(id=row.id, name=row.name, email=row.email)


async def get_current_user(
    session: DbSession,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> UserIdentity:
    """Resolve the Authorization header to the acting user. Raises AuthError (401)."""
    return await verify_token(session, credentials.credentials if credentials else None)


CurrentUser = Annotated[UserIdentity, Depends(get_current_user)]
