from fastapi import APIRouter, Depends, HTTPException

from salon_dashboard.dependencies.services import get_login_service
from salon_dashboard.schemas.auth import LoginRequest, LoginResponse
from salon_dashboard.services import LoginService
from salon_dashboard.services.auth import InvalidCredentialsError
from salon_dashboard.services.exceptions import ServiceError

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(
    req: LoginRequest,
    service: LoginService = Depends(get_login_service),
):
    try:
        return await service.login(req)
    except InvalidCredentialsError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    except ServiceError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
