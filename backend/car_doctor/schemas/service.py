"""Service Schemas — payload for creating a bookable service.

Invariants:
    - service_id, title and price are required (they form the duplicate key)
    - price keeps its JSON type: "20.00" stays a string, 200 an int, 20.5 a float
"""

from pydantic import BaseModel, ConfigDict, Field


class ServiceCreate(BaseModel):
    """New service. `_id` is assigned by storage and rejected here."""
    model_config = ConfigDict(extra="allow")

    service_id: str = Field(min_length=1)
    title: str = Field(min_length=1)
    price: str | int | float
    img: str | None = None
    description: str | None = None
    facility: list[dict] | None = None

    def to_document(self) -> dict:
        doc = self.model_dump(exclude_unset=True)
        doc.pop("_id", None)
        return doc
