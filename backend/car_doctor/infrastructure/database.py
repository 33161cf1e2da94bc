"""Document Store Manager — async MongoDB client with error mapping and health checks.

Invariants:
    - One AsyncMongoClient per process, created in the FastAPI lifespan
    - Every driver or BSON encoding failure (PyMongoError, BSONError, OverflowError)
      raised inside operation() surfaces as StorageError with the original message
    - The manager lives on app.state and reaches handlers only through get_db

Design Decisions:
    - Stable API v1 (strict, deprecation errors) pinned on the client
    - operation() is a context manager so repositories keep one storage call per block
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from bson.errors import BSONError
from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from car_doctor.core.errors import StorageError

logger = logging.getLogger(__name__)

# OverflowError: ints beyond 8 bytes fail during BSON encoding
STORAGE_EXCEPTIONS = (PyMongoError, BSONError, OverflowError)


class MongoManager:
    """Owns the Mongo client and the application database handle."""

    def __init__(self, uri: str, database_name: str, **client_kwargs):
        client_kwargs.setdefault(
            "server_api",
            ServerApi("1", strict=True, deprecation_errors=True),
        )
        self.client = AsyncMongoClient(uri, **client_kwargs)
        self.database = self.client[database_name]

    def collection(self, name: str):
        return self.database[name]

    @asynccontextmanager
    async def operation(
        self, collection: str, name: str,
    ) -> AsyncGenerator[None, None]:
        """Map driver failures inside the block to StorageError."""
        try:
            yield
        except STORAGE_EXCEPTIONS as e:
            logger.error(
                f"Storage {name} on {collection} failed: {e}",
                extra={"operation": name, "collection": collection},
            )
            raise StorageError(str(e), name, collection) from e

    async def ping(self) -> None:
        async with self.operation("admin", "ping"):
            await self.client.admin.command("ping")

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            await self.ping()
            return True
        except StorageError:
            return False

    async def close(self) -> None:
        await self.client.close()


def init_db(uri: str, database_name: str, **kwargs) -> MongoManager:
    return MongoManager(uri, database_name, **kwargs)


def get_db(request: Request) -> MongoManager:
    """FastAPI dependency for the process-wide storage handle."""
    manager = getattr(request.app.state, "db_manager", None)
    if manager is None:
        raise RuntimeError("Database not initialized")
    return manager
