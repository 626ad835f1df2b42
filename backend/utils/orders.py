from fastapi import Depends

from database import get_db


# revenue and order count per calendar day, day taken from the ObjectId
DAILY_REVENUE_PIPELINE = [
    {"$addFields": {"createdAt": {"$toDate": "$_id"}}},
    {
        "$group": {
            "_id": {"$dateToString": {"format": "%Y-%m-%d", "date": "$createdAt"}},
            "revenue": {"$sum": "$price"},
            "orders": {"$sum": 1},
        }
    },
    {"$sort": {"_id": 1}},
]


class OrderRepository:
    def __init__(self, collection):
        self.collection = collection

    async def insert(self, order: dict) -> str:
        result = await self.collection.insert_one(order)
        return str(result.inserted_id)

    async def find_by_customer(self, email: str) -> list[dict]:
        return await self.collection.find({"customer.email": email}).to_list(length=None)

    async def find_by_seller(self, email: str) -> list[dict]:
        return await self.collection.find({"seller.email": email}).to_list(length=None)

    async def count_all(self) -> int:
        return await self.collection.estimated_document_count()

    async def daily_revenue(self) -> list[dict]:
        """Rows of `{"date", "revenue", "orders"}` ordered by date."""
        rows = await self.collection.aggregate(DAILY_REVENUE_PIPELINE).to_list(length=None)
        return [
            {"date": row["_id"], "revenue": row.get("revenue", 0), "orders": row.get("orders", 0)}
            for row in rows
        ]


def get_order_repository(db=Depends(get_db)) -> OrderRepository:
    return OrderRepository(db.orders)
