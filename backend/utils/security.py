import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyCookie

from config.constants import TOKEN_COOKIE_NAME
from models.user import UserRole
from utils.jwt import TokenError, decode_token
from utils.users import UserRepository, get_user_repository

logger = logging.getLogger(__name__)

session_cookie = APIKeyCookie(name=TOKEN_COOKIE_NAME, auto_error=False)


async def get_current_identity(token: str | None = Depends(session_cookie)) -> dict:
    """
    Verified `{"email": ...}` of the caller.
    Missing, tampered or expired credentials are all 401.
    """
    try:
        return decode_token(token)
    except TokenError as e:
        logger.debug("TOKEN_REJECTED reason=%s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="unauthorized access",
        )


def require_role(required_role: UserRole | str):
    role = UserRole(required_role).value
    denied = f"{role.capitalize()} only actions"

    async def checker(
        identity: dict = Depends(get_current_identity),
        users: UserRepository = Depends(get_user_repository),
    ):
        # looked up on every request so role changes apply immediately
        user = await users.find_by_email(identity["email"])
        if not user or user.get("role") != role:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=denied,
            )
        return user

    return checker


async def require_self(email: str, identity: dict = Depends(get_current_identity)) -> dict:
    """The `{email}` path parameter must name the caller."""
    if identity["email"] != email:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="forbidden access",
        )
    return identity
