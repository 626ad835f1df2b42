from fastapi import APIRouter, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool

from models.plant import PaymentIntentRequest
from utils.guards import parse_object_id
from utils.payments import amount_to_cents, create_payment_intent
from utils.plants import PlantRepository, get_plant_repository

router = APIRouter(tags=["Payments"])


@router.post("/create-payment-intent")
async def payment_intent(
    data: PaymentIntentRequest,
    plants: PlantRepository = Depends(get_plant_repository),
):
    plant = await plants.find_by_id(parse_object_id(data.plantId, "plant id"))
    if not plant:
        raise HTTPException(404, "Plant not found")

    amount_cents = amount_to_cents(data.quantity * float(plant["price"]))

    intent = await run_in_threadpool(create_payment_intent, amount_cents=amount_cents)

    return {"clientSecret": intent.get("client_secret")}
