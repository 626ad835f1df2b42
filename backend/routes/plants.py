from fastapi import APIRouter, Depends, HTTPException

from models.plant import PlantCreate, QuantityUpdate
from models.user import UserRole
from utils.guards import parse_object_id
from utils.mongo import serialize_doc, serialize_docs
from utils.plants import PlantRepository, get_plant_repository
from utils.security import get_current_identity, require_role

router = APIRouter(tags=["Plants"])


# =========================
# SELLER: ADD PLANT
# =========================

@router.post("/add-plant")
async def add_plant(
    data: PlantCreate,
    seller=Depends(require_role(UserRole.SELLER)),
    plants: PlantRepository = Depends(get_plant_repository),
):
    plant = data.model_dump()
    plant["seller"] = {**plant.get("seller", {}), "email": seller["email"]}

    inserted_id = await plants.insert(plant)
    return {"insertedId": inserted_id}


# =========================
# PUBLIC CATALOGUE
# =========================

@router.get("/plants")
async def list_plants(plants: PlantRepository = Depends(get_plant_repository)):
    return serialize_docs(await plants.list_all())


@router.get("/plant/{plant_id}")
async def get_plant(
    plant_id: str,
    plants: PlantRepository = Depends(get_plant_repository),
):
    plant = await plants.find_by_id(parse_object_id(plant_id, "plant id"))
    if not plant:
        raise HTTPException(404, "Plant not found")
    return serialize_doc(plant)


# =========================
# STOCK
# =========================

@router.patch("/quantity-update/{plant_id}")
async def update_quantity(
    plant_id: str,
    data: QuantityUpdate,
    identity: dict = Depends(get_current_identity),
    plants: PlantRepository = Depends(get_plant_repository),
):
    oid = parse_object_id(plant_id, "plant id")

    plant = await plants.find_by_id(oid)
    if not plant:
        raise HTTPException(404, "Plant not found")

    delta = data.quantityToUpdate if data.status == "increase" else -data.quantityToUpdate

    if not await plants.adjust_quantity(oid, delta):
        raise HTTPException(400, "Not enough stock")

    return {"success": True}
