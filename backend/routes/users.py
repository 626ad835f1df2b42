from fastapi import APIRouter, Depends

from models.user import UserProfile
from utils.accounts import get_role, request_seller_promotion, upsert_on_login
from utils.mongo import serialize_doc
from utils.security import require_self
from utils.users import UserRepository, get_user_repository

router = APIRouter(tags=["Users"])


# ======================
# Save / refresh on login
# ======================

@router.post("/user")
async def save_user(
    data: UserProfile,
    users: UserRepository = Depends(get_user_repository),
):
    user = await upsert_on_login(users, data.model_dump())
    return serialize_doc(user)


@router.get("/user/role/{email}")
async def user_role(
    email: str,
    users: UserRepository = Depends(get_user_repository),
):
    return {"role": await get_role(users, email)}


# ======================
# Become seller (self-service)
# ======================

@router.patch("/became-seller-request/{email}")
async def became_seller_request(
    email: str,
    identity: dict = Depends(require_self),
    users: UserRepository = Depends(get_user_repository),
):
    await request_seller_promotion(users, email)
    return {"success": True}
