"""In-memory stand-in for the async Mongo collections used by the repositories.

Supports only what the app calls: find(...).to_list(), find_one, insert_one,
update_one with $set, delete_one, and admin.command("ping"). Filters match on
top-level equality; projections are either all-inclusive or all-exclusive.

Failures are injected per operation name via `fail_on`, e.g.
    db["services"].fail_on["insert_one"] = PyMongoError("boom")
"""

import copy

from bson import ObjectId
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult


def _matches(doc: dict, query: dict | None) -> bool:
    return all(doc.get(k) == v for k, v in (query or {}).items())


def _project(doc: dict, projection: dict | None) -> dict:
    doc = copy.deepcopy(doc)
    if not projection:
        return doc
    included = [k for k, v in projection.items() if v]
    if included:
        keep = set(included)
        if projection.get("_id", 1):
            keep.add("_id")
        return {k: v for k, v in doc.items() if k in keep}
    return {k: v for k, v in doc.items() if k not in projection}


class FakeCursor:
    def __init__(self, collection: "FakeCollection", query, projection):
        self._collection = collection
        self._query = query
        self._projection = projection

    async def to_list(self, length=None):
        self._collection._maybe_fail("find")
        docs = [
            _project(d, self._projection)
            for d in self._collection.docs if _matches(d, self._query)
        ]
        return docs if length is None else docs[:length]


class FakeCollection:
    def __init__(self, name: str):
        self.name = name
        self.docs: list[dict] = []
        self.fail_on: dict[str, Exception] = {}
        self.calls: list[str] = []

    def _maybe_fail(self, op: str):
        self.calls.append(op)
        if op in self.fail_on:
            raise self.fail_on[op]

    def seed(self, *docs: dict) -> list[ObjectId]:
        ids = []
        for doc in docs:
            doc = copy.deepcopy(doc)
            doc.setdefault("_id", ObjectId())
            self.docs.append(doc)
            ids.append(doc["_id"])
        return ids

    def find(self, query=None, projection=None):
        return FakeCursor(self, query, projection)

    async def find_one(self, query=None, projection=None):
        self._maybe_fail("find_one")
        for doc in self.docs:
            if _matches(doc, query):
                return _project(doc, projection)
        return None

    async def insert_one(self, doc: dict):
        self._maybe_fail("insert_one")
        doc.setdefault("_id", ObjectId())
        self.docs.append(copy.deepcopy(doc))
        return InsertOneResult(doc["_id"], True)

    async def update_one(self, query: dict, update: dict):
        self._maybe_fail("update_one")
        for doc in self.docs:
            if _matches(doc, query):
                changes = update.get("$set", {})
                modified = any(doc.get(k) != v for k, v in changes.items())
                doc.update(changes)
                return UpdateResult(
                    {"n": 1, "nModified": int(modified)}, True,
                )
        return UpdateResult({"n": 0, "nModified": 0}, True)

    async def delete_one(self, query: dict):
        self._maybe_fail("delete_one")
        for i, doc in enumerate(self.docs):
            if _matches(doc, query):
                del self.docs[i]
                return DeleteResult({"n": 1}, True)
        return DeleteResult({"n": 0}, True)


class FakeDatabase:
    def __init__(self):
        self._collections: dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self._collections:
            self._collections[name] = FakeCollection(name)
        return self._collections[name]


class FakeAdmin:
    def __init__(self):
        self.fail_with: Exception | None = None

    async def command(self, name: str):
        if self.fail_with:
            raise self.fail_with
        return {"ok": 1}


class FakeClient:
    def __init__(self):
        self.admin = FakeAdmin()
        self.closed = False

    async def close(self):
        self.closed = True
