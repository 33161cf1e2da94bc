"""Order Book — CRUD over the `servicesOrder` (checkout) collection.

Invariants:
    - list_for_email returns exactly the orders whose `email` equals the argument
    - set_status touches only the `status` field of one order
    - cancel on an unknown id returns deletedCount 0, never raises
"""

from bson import ObjectId

from car_doctor.core.identifiers import to_jsonable
from car_doctor.infrastructure.database import MongoManager
from car_doctor.services.write_results import (
    delete_result, insert_result, update_result,
)

ORDERS_COLLECTION = "servicesOrder"


class OrderBook:
    """Repository for service orders placed at checkout."""

    def __init__(self, db: MongoManager):
        self._db = db
        self._collection = db.collection(ORDERS_COLLECTION)

    async def list_for_email(self, email: str) -> list[dict]:
        async with self._db.operation(ORDERS_COLLECTION, "find"):
            docs = await self._collection.find({"email": email}).to_list()
        return to_jsonable(docs)

    async def submit(self, order: dict) -> dict:
        async with self._db.operation(ORDERS_COLLECTION, "insert_one"):
            result = await self._collection.insert_one(dict(order))
        return insert_result(result)

    async def set_status(self, order_id: ObjectId, status: str) -> dict:
        async with self._db.operation(ORDERS_COLLECTION, "update_one"):
            result = await self._collection.update_one(
                {"_id": order_id}, {"$set": {"status": status}},
            )
        return update_result(result)

    async def cancel(self, order_id: ObjectId) -> dict:
        async with self._db.operation(ORDERS_COLLECTION, "delete_one"):
            result = await self._collection.delete_one({"_id": order_id})
        return delete_result(result)
