from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from salon_dashboard.dependencies.services import get_appointment_service
from salon_dashboard.schemas.appointment import (
    Appointment,
    AppointmentCreate,
    AppointmentListRequest,
    AppointmentStatus,
    AppointmentStatusUpdate,
    MessageResponse,
)
from salon_dashboard.services import AppointmentService
from salon_dashboard.services.exceptions import RecordNotFoundError, ServiceError

router = APIRouter()


@router.get("", response_model=List[Appointment])
async def list_appointments(
    busca: Optional[str] = Query(default=None, description="Client or service name fragment"),
    status: Optional[AppointmentStatus] = None,
    service: AppointmentService = Depends(get_appointment_service),
):
    try:
        return await service.list(AppointmentListRequest(search=busca, status=status))
    except ServiceError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc


@router.post("", response_model=Appointment, status_code=201)
async def create_appointment(
    req: AppointmentCreate,
    service: AppointmentService = Depends(get_appointment_service),
):
    try:
        return await service.create(req)
    except ServiceError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc


@router.put("/{appointment_id}", response_model=Appointment)
async def update_appointment_status(
    appointment_id: int,
    req: AppointmentStatusUpdate,
    service: AppointmentService = Depends(get_appointment_service),
):
    try:
        return await service.update_status(appointment_id, req.status)
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ServiceError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc


@router.delete("/{appointment_id}", response_model=MessageResponse)
async def delete_appointment(
    appointment_id: int,
    service: AppointmentService = Depends(get_appointment_service),
):
    try:
        await service.delete(appointment_id)
    except ServiceError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return {"message": "Agendamento removido com sucesso."}
