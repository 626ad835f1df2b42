from bson import ObjectId
from fastapi import Depends

from database import get_db


class PlantRepository:
    def __init__(self, collection):
        self.collection = collection

    async def insert(self, plant: dict) -> str:
        result = await self.collection.insert_one(plant)
        return str(result.inserted_id)

    async def list_all(self) -> list[dict]:
        return await self.collection.find().to_list(length=None)

    async def find_by_id(self, plant_id: ObjectId) -> dict | None:
        return await self.collection.find_one({"_id": plant_id})

    async def adjust_quantity(self, plant_id: ObjectId, delta: int) -> bool:
        """
        Atomically add `delta` to the stock.
        A negative delta only applies while enough stock remains.
        """
        query = {"_id": plant_id}
        if delta < 0:
            query["quantity"] = {"$gte": -delta}

        result = await self.collection.update_one(query, {"$inc": {"quantity": delta}})
        return result.modified_count > 0

    async def count_all(self) -> int:
        return await self.collection.estimated_document_count()


def get_plant_repository(db=Depends(get_db)) -> PlantRepository:
    return PlantRepository(db.plants)
