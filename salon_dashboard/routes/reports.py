from fastapi import APIRouter, Depends, HTTPException

from salon_dashboard.dependencies.services import get_report_service
from salon_dashboard.schemas.analytics import AggregateResult, DateFilter, ReportResponse
from salon_dashboard.services import ReportService
from salon_dashboard.services.exceptions import ServiceError

router = APIRouter()


@router.get("/dashboard", response_model=AggregateResult)
async def dashboard_overview(
    service: ReportService = Depends(get_report_service),
):
    try:
        return await service.summarize(DateFilter.all_time)
    except ServiceError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc


@router.get("/relatorios", response_model=ReportResponse)
async def get_report(
    filtro: DateFilter = DateFilter.all_time,
    service: ReportService = Depends(get_report_service),
):
    try:
        return await service.report(filtro)
    except ServiceError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
