"""FastAPI dependencies for auth and tenant resolution."""

import uuid
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import decode_access_token
from app.core.tenant_context import set_tenant_context
from app.persistence.database import get_db
from app.persistence.models.enterprise import Profile
from app.persistence.repositories.profile_repository import ProfileRepository

security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_profile(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Profile:
    """Get the profile of the authenticated user from the bearer JWT.

    The token's ``sub`` claim is the auth provider's user id, which is also
    the profile id.

    Args:
        credentials: HTTP bearer credentials
        db: Database session

    Returns:
        Current profile

    Raises:
        HTTPException: If authentication fails
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise _unauthorized("Invalid authentication credentials")

    try:
        profile_id = uuid.UUID(str(payload.get("sub")))
    except (ValueError, TypeError):
        raise _unauthorized("Invalid token payload")

    profile = await ProfileRepository(db).get_active(profile_id)
    if profile is None:
        raise _unauthorized("Profile not found")

    return profile


async def require_enterprise(
    profile: Annotated[Profile, Depends(get_current_profile)],
) -> uuid.UUID:
    """Resolve the acting enterprise and set it as tenant context.

    Returns:
        Enterprise ID of the current profile
    """
    set_tenant_context(profile.enterprise_id)
    return profile.enterprise_id


CurrentEnterprise = Annotated[uuid.UUID, Depends(require_enterprise)]
DbSession = Annotated[AsyncSession, Depends(get_db)]
