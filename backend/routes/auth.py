from fastapi import APIRouter, Response

from config.constants import TOKEN_COOKIE_NAME, COOKIE_PATH
from config.env import is_production
from models.user import SessionClaim
from utils.jwt import create_access_token

router = APIRouter(tags=["Auth"])


def session_cookie_profile() -> dict:
    """
    Attributes shared by the set and the clear of the session cookie.
    Some clients ignore a clear whose attributes differ from the issued cookie.
    """
    production = is_production()
    return {
        "httponly": True,
        "secure": production,
        "samesite": "none" if production else "strict",
        "path": COOKIE_PATH,
    }


# ======================
# Issue session cookie
# ======================

@router.post("/jwt")
async def issue_token(data: SessionClaim, response: Response):
    token = create_access_token({"email": data.email})

    response.set_cookie(
        TOKEN_COOKIE_NAME,
        token,
        **session_cookie_profile(),
    )
    return {"success": True}


# ======================
# Logout
# ======================

@router.get("/logout")
async def logout(response: Response):
    response.delete_cookie(TOKEN_COOKIE_NAME, **session_cookie_profile())
    return {"success": True}
