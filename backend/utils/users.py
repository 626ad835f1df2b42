from fastapi import Depends
from pymongo import ReturnDocument

from database import get_db


class UserRepository:
    """
    Data access for the `users` collection.
    One document per email; never deletes.
    """

    def __init__(self, collection):
        self.collection = collection

    async def find_by_email(self, email: str) -> dict | None:
        return await self.collection.find_one({"email": email})

    async def upsert(self, email: str, on_insert: dict, always: dict) -> dict:
        """
        Single round trip: `on_insert` is written only when the record is
        created, `always` on every call. Returns the record after the write.
        """
        update = {"$set": always}
        if on_insert:
            update["$setOnInsert"] = on_insert

        return await self.collection.find_one_and_update(
            {"email": email},
            update,
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )

    async def update_fields(self, email: str, fields: dict) -> bool:
        """Set `fields` on the record. False when no record matched."""
        result = await self.collection.update_one({"email": email}, {"$set": fields})
        return result.matched_count > 0

    async def list_excluding(self, email: str) -> list[dict]:
        cursor = self.collection.find({"email": {"$ne": email}})
        return await cursor.to_list(length=None)

    async def count_by_role(self, role: str) -> int:
        return await self.collection.count_documents({"role": role})

    async def count_all(self) -> int:
        return await self.collection.estimated_document_count()


def get_user_repository(db=Depends(get_db)) -> UserRepository:
    return UserRepository(db.users)
