from fastapi import APIRouter, Depends, HTTPException

from salon_dashboard.dependencies.services import get_shop_config_service
from salon_dashboard.schemas.shop_config import (
    ShopConfig,
    ShopConfigUpdate,
    ShopConfigUpdateResponse,
)
from salon_dashboard.services import ShopConfigService
from salon_dashboard.services.exceptions import ServiceError

router = APIRouter()


@router.get("", response_model=ShopConfig)
async def get_config(
    service: ShopConfigService = Depends(get_shop_config_service),
):
    try:
        return await service.get()
    except ServiceError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc


@router.put("", response_model=ShopConfigUpdateResponse)
async def save_config(
    req: ShopConfigUpdate,
    service: ShopConfigService = Depends(get_shop_config_service),
):
    try:
        config = await service.update(req)
    except ServiceError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return ShopConfigUpdateResponse(message="Configurações salvas!", dados=config)
