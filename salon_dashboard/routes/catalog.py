from typing import List

from fastapi import APIRouter, Depends, HTTPException

from salon_dashboard.dependencies.services import get_catalog_service
from salon_dashboard.schemas.appointment import MessageResponse
from salon_dashboard.schemas.catalog import CatalogService, CatalogServiceInput
from salon_dashboard.services import ServiceCatalogService
from salon_dashboard.services.exceptions import RecordNotFoundError, ServiceError

router = APIRouter()


@router.get("", response_model=List[CatalogService])
async def list_services(
    service: ServiceCatalogService = Depends(get_catalog_service),
):
    try:
        return await service.list()
    except ServiceError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc


@router.post("", response_model=CatalogService, status_code=201)
async def add_service(
    req: CatalogServiceInput,
    service: ServiceCatalogService = Depends(get_catalog_service),
):
    try:
        return await service.create(req)
    except ServiceError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc


@router.put("/{service_id}", response_model=CatalogService)
async def edit_service(
    service_id: int,
    req: CatalogServiceInput,
    service: ServiceCatalogService = Depends(get_catalog_service),
):
    try:
        return await service.update(service_id, req)
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ServiceError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc


@router.delete("/{service_id}", response_model=MessageResponse)
async def remove_service(
    service_id: int,
    service: ServiceCatalogService = Depends(get_catalog_service),
):
    try:
        await service.delete(service_id)
    except ServiceError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return {"message": "Serviço removido."}
