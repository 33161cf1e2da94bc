"""Write Results — render pymongo write results in the camelCase wire shape.

Invariants:
    - Keys match what existing clients read: acknowledged, insertedId,
      matchedCount, modifiedCount, upsertedCount, upsertedId, deletedCount
    - ObjectIds are rendered as hex strings
"""

from pymongo.results import DeleteResult, InsertOneResult, UpdateResult


def _id_or_none(value):
    return str(value) if value is not None else None


def insert_result(result: InsertOneResult) -> dict:
    return {
        "acknowledged": result.acknowledged,
        "insertedId": _id_or_none(result.inserted_id),
    }


def update_result(result: UpdateResult) -> dict:
    upserted_id = result.upserted_id
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
        "upsertedCount": 1 if upserted_id is not None else 0,
        "upsertedId": _id_or_none(upserted_id),
    }


def delete_result(result: DeleteResult) -> dict:
    return {
        "acknowledged": result.acknowledged,
        "deletedCount": result.deleted_count,
    }
