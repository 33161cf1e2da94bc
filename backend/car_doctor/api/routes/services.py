"""Service Routes — catalog listing, detail and creation.

Invariants:
    - GET /services omits description and facility
    - GET /services/{id} returns {_id, title, price, img} or null
    - POST /services reports "Added" or "Already exists in DB" in `status`
"""

from bson import ObjectId
from fastapi import APIRouter, Depends

from car_doctor.api.dependencies import document_id, get_catalog, log_request
from car_doctor.schemas.service import ServiceCreate
from car_doctor.services.catalog import ServiceCatalog

router = APIRouter(
    prefix="/services", tags=["services"],
    dependencies=[Depends(log_request)],
)


@router.get("")
async def list_services(catalog: ServiceCatalog = Depends(get_catalog)):
    return await catalog.list_services()


@router.get("/{id}")
async def get_service(
    service_id: ObjectId = Depends(document_id),
    catalog: ServiceCatalog = Depends(get_catalog),
):
    return await catalog.get_service(service_id)


@router.post("")
async def create_service(
    body: ServiceCreate, catalog: ServiceCatalog = Depends(get_catalog),
):
    return await catalog.create_service(body.to_document())
