from fastapi import APIRouter, Depends

from models.user import RoleUpdate, UserRole
from utils.accounts import approve_role
from utils.mongo import serialize_docs
from utils.orders import OrderRepository, get_order_repository
from utils.plants import PlantRepository, get_plant_repository
from utils.security import require_role
from utils.users import UserRepository, get_user_repository


router = APIRouter(tags=["Admin"])


# =====================================================
# USERS
# =====================================================

@router.get("/all-users")
async def all_users(
    admin=Depends(require_role(UserRole.ADMIN)),
    users: UserRepository = Depends(get_user_repository),
):
    return serialize_docs(await users.list_excluding(admin["email"]))


@router.patch("/user/role/update/{email}")
async def update_user_role(
    email: str,
    data: RoleUpdate,
    admin=Depends(require_role(UserRole.ADMIN)),
    users: UserRepository = Depends(get_user_repository),
):
    await approve_role(users, email, data.role, actor_email=admin["email"])
    return {"success": True}


# =====================================================
# STATS
# =====================================================

@router.get("/admin-stats")
async def admin_stats(
    admin=Depends(require_role(UserRole.ADMIN)),
    users: UserRepository = Depends(get_user_repository),
    plants: PlantRepository = Depends(get_plant_repository),
    orders: OrderRepository = Depends(get_order_repository),
):
    total_admin = await users.count_by_role(UserRole.ADMIN.value)
    total_user = await users.count_all() - total_admin
    total_plant = await plants.count_all()
    total_order = await orders.count_all()

    daily = await orders.daily_revenue()

    # key spellings are what the dashboard frontend reads
    bar_chart_data = [
        {"date": row["date"], "revenew": row["revenue"], "order": row["orders"]}
        for row in daily
    ]

    return {
        "totalUser": total_user,
        "totalPlant": total_plant,
        "totalOrder": total_order,
        "totalRevenew": sum(row["revenue"] for row in daily),
        "barChartData": bar_chart_data,
    }
