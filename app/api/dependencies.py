from fastapi import Depends, HTTPException, status

from app.collections.user import get_user_from_id
from app.core.security import verify_jwt
from app.models.user import RequestContext


async def get_request_context(user_payload: dict = Depends(verify_jwt)) -> RequestContext:
    """
    Builds the per-request context from the bearer token. The user is read
    fresh for every request so language or village changes apply immediately.
    """
    user = await get_user_from_id(user_payload["sub"])
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found.",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return RequestContext.for_user(user)
