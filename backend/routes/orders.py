import logging

from fastapi import APIRouter, Depends

from models.order import OrderCreate
from models.user import UserRole
from utils.mongo import serialize_docs
from utils.orders import OrderRepository, get_order_repository
from utils.security import get_current_identity, require_role, require_self

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Orders"])


# ======================================================
# CREATE ORDER (CUSTOMER)
# ======================================================

@router.post("/order")
async def create_order(
    data: OrderCreate,
    identity: dict = Depends(get_current_identity),
    orders: OrderRepository = Depends(get_order_repository),
):
    order = data.model_dump()
    order["customer"] = {**order.get("customer", {}), "email": identity["email"]}

    inserted_id = await orders.insert(order)
    logger.info("ORDER_CREATED id=%s customer=%s", inserted_id, identity["email"])
    return {"insertedId": inserted_id}


# ======================================================
# LIST ORDERS
# ======================================================

@router.get("/orders/customer/{email}")
async def customer_orders(
    email: str,
    identity: dict = Depends(require_self),
    orders: OrderRepository = Depends(get_order_repository),
):
    return serialize_docs(await orders.find_by_customer(email))


@router.get("/orders/seller/{email}")
async def seller_orders(
    email: str,
    seller=Depends(require_role(UserRole.SELLER)),
    identity: dict = Depends(require_self),
    orders: OrderRepository = Depends(get_order_repository),
):
    return serialize_docs(await orders.find_by_seller(email))
