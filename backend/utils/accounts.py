import logging
from datetime import datetime, timezone

from fastapi import HTTPException

from config.constants import DEFAULT_ROLE, DEFAULT_STATUS, PROTECTED_USER_FIELDS
from models.user import SellerStatus, UserRole
from utils.users import UserRepository

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def parse_role(value: str) -> UserRole:
    try:
        return UserRole(value)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid role")


# ==============================
# Login
# ==============================

async def upsert_on_login(users: UserRepository, profile: dict) -> dict:
    """
    Create the record on first login, afterwards only touch last_logged_in.
    Role, status and created_at from the client are ignored.
    """
    email = profile["email"]
    now = _now()

    extra = {
        k: v for k, v in profile.items()
        if k not in PROTECTED_USER_FIELDS and v is not None
    }
    on_insert = {
        **extra,
        "role": DEFAULT_ROLE,
        "status": DEFAULT_STATUS,
        "created_at": now,
    }

    user = await users.upsert(email, on_insert=on_insert, always={"last_logged_in": now})

    if user.get("created_at") == user.get("last_logged_in"):
        logger.info("USER_CREATED email=%s", email)

    return user


async def get_role(users: UserRepository, email: str) -> str:
    user = await users.find_by_email(email)
    if not user:
        raise HTTPException(status_code=404, detail="User not Found")
    return user.get("role")


# ==============================
# Seller promotion
# ==============================

async def request_seller_promotion(users: UserRepository, email: str) -> None:
    user = await users.find_by_email(email)
    if not user:
        raise HTTPException(status_code=404, detail="User not Found")

    if user.get("role") != UserRole.CUSTOMER.value:
        raise HTTPException(status_code=400, detail="Only customers can request seller access")

    matched = await users.update_fields(email, {"status": SellerStatus.REQUESTED.value})
    if not matched:
        raise HTTPException(status_code=404, detail="User not Found")

    logger.info("SELLER_REQUESTED email=%s", email)


async def approve_role(users: UserRepository, target_email: str, new_role: str, *, actor_email: str | None = None) -> None:
    role = parse_role(new_role)

    # role and status land in the same single-document update
    matched = await users.update_fields(
        target_email,
        {"role": role.value, "status": SellerStatus.VERIFIED.value},
    )
    if not matched:
        raise HTTPException(status_code=404, detail="User not Found")

    logger.info("ROLE_UPDATED email=%s role=%s by=%s", target_email, role.value, actor_email)
