"""Service Catalog — read and create entries of the `services` collection.

Invariants:
    - Listing never returns `description` or `facility`
    - Detail returns only `_id`, `title`, `price`, `img` (or None when missing)
    - create_service never inserts when a document with the same
      (service_id, title, price) already exists at check time

Design Decisions:
    - Duplicate detection is find-then-insert, two separate storage calls.
      Concurrent identical creations can both pass the check and insert twice;
      no unique index is assumed on the collection.
"""

import logging

from bson import ObjectId

from car_doctor.core.identifiers import to_jsonable
from car_doctor.infrastructure.database import MongoManager
from car_doctor.services.write_results import insert_result

logger = logging.getLogger(__name__)

SERVICES_COLLECTION = "services"

LIST_PROJECTION = {"description": 0, "facility": 0}
DETAIL_PROJECTION = {"title": 1, "price": 1, "img": 1}
DUPLICATE_KEY = ("service_id", "title", "price")

STATUS_ADDED = "Added"
STATUS_ALREADY_EXISTS = "Already exists in DB"


class ServiceCatalog:
    """Repository for bookable services."""

    def __init__(self, db: MongoManager):
        self._db = db
        self._collection = db.collection(SERVICES_COLLECTION)

    async def list_services(self) -> list[dict]:
        async with self._db.operation(SERVICES_COLLECTION, "find"):
            docs = await self._collection.find({}, LIST_PROJECTION).to_list()
        return to_jsonable(docs)

    async def get_service(self, service_id: ObjectId) -> dict | None:
        async with self._db.operation(SERVICES_COLLECTION, "find_one"):
            doc = await self._collection.find_one(
                {"_id": service_id}, DETAIL_PROJECTION,
            )
        return to_jsonable(doc)

    async def create_service(self, service: dict) -> dict:
        """Insert `service` unless an identical (service_id, title, price) exists."""
        query = {key: service.get(key) for key in DUPLICATE_KEY}
        async with self._db.operation(SERVICES_COLLECTION, "find_one"):
            existing = await self._collection.find_one(query, {"_id": 1})
        if existing:
            logger.info(f"Service {query['service_id']} already exists")
            return {
                "insertedId": str(existing["_id"]),
                "status": STATUS_ALREADY_EXISTS,
            }

        async with self._db.operation(SERVICES_COLLECTION, "insert_one"):
            result = await self._collection.insert_one(dict(service))
        return {**insert_result(result), "status": STATUS_ADDED}
