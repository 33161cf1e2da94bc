"""Checkout Schemas — service order submission and status updates.

Invariants:
    - Every order carries an email (its owner)
    - Status updates read the legacy `approved` field
"""

from pydantic import BaseModel, ConfigDict, Field

from car_doctor.schemas.fields import Email


class OrderCreate(BaseModel):
    """Service order as submitted by the checkout form."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    email: Email
    customer_name: str | None = Field(None, alias="customerName")
    date: str | None = None
    service: str | None = None
    service_id: str | None = None
    price: str | int | float | None = None
    img: str | None = None
    status: str | None = None

    def to_document(self) -> dict:
        doc = self.model_dump(exclude_unset=True, by_alias=True)
        doc.pop("_id", None)
        return doc


class OrderStatusUpdate(BaseModel):
    """PATCH body: the new status arrives under `approved`."""
    approved: str = Field(min_length=1)
