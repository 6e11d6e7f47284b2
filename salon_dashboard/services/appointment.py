from __future__ import annotations

import logging
from typing import List

from salon_dashboard.clients.backend import SalonBackendClient
from salon_dashboard.schemas.appointment import (
    Appointment,
    AppointmentCreate,
    AppointmentListRequest,
    AppointmentStatus,
)
from salon_dashboard.services.exceptions import (
    DownstreamServiceError,
    RecordNotFoundError,
    ServiceError,
)
from salon_dashboard.services.memory_store import AppointmentStore, get_store

logger = logging.getLogger(__name__)


class AppointmentService:
    def __init__(
        self,
        client: SalonBackendClient,
        *,
        repository: AppointmentStore | None = None,
    ) -> None:
        self._client = client
        self._repository = repository
        if self._client.use_local_store:
            self._repository = repository or get_store().appointments

    async def list(self, request: AppointmentListRequest | None = None) -> List[Appointment]:
        logger.info("Listing appointments")
        if self._client.use_local_store:
            await self._client.simulate_latency()
            if not self._repository:
                raise RuntimeError("Appointment repository not configured")
            return await self._repository.list(request)

        params = {}
        if request is not None:
            if request.search:
                params["busca"] = request.search
            if request.status is not None:
                params["status"] = request.status.value
        try:
            data = await self._client.get("/agendamentos", params=params or None)
            return [Appointment.model_validate(item) for item in data]
        except ServiceError:
            raise
        except Exception as exc:  # pragma: no cover - unexpected payload
            logger.exception("Unexpected error while listing appointments")
            raise ServiceError("Failed to list appointments", cause=exc)

    async def create(self, request: AppointmentCreate) -> Appointment:
        logger.info("Booking %s for %s", request.service_name, request.client_name)
        if self._client.use_local_store:
            await self._client.simulate_latency()
            if not self._repository:
                raise RuntimeError("Appointment repository not configured")
            return await self._repository.create(request)

        try:
            payload = request.model_dump(by_alias=True)
            data = await self._client.post("/agendamentos", payload)
            return Appointment.model_validate(data)
        except ServiceError:
            raise
        except Exception as exc:  # pragma: no cover - unexpected payload
            logger.exception("Unexpected error while creating appointment")
            raise ServiceError("Failed to create appointment", cause=exc)

    async def update_status(
        self, appointment_id: int, status: AppointmentStatus
    ) -> Appointment:
        logger.info("Moving appointment %s to '%s'", appointment_id, status.value)
        if self._client.use_local_store:
            await self._client.simulate_latency()
            if not self._repository:
                raise RuntimeError("Appointment repository not configured")
            updated = await self._repository.update_status(appointment_id, status)
            if updated is None:
                raise RecordNotFoundError("Agendamento não encontrado.")
            return updated

        try:
            data = await self._client.put(
                f"/agendamentos/{appointment_id}", {"status": status.value}
            )
            return Appointment.model_validate(data)
        except DownstreamServiceError as exc:
            if exc.status_code == 404:
                raise RecordNotFoundError("Agendamento não encontrado.", cause=exc) from exc
            raise
        except ServiceError:
            raise
        except Exception as exc:  # pragma: no cover - unexpected payload
            logger.exception("Unexpected error while updating appointment status")
            raise ServiceError("Failed to update appointment", cause=exc)

    async def delete(self, appointment_id: int) -> None:
        logger.info("Removing appointment %s", appointment_id)
        if self._client.use_local_store:
            await self._client.simulate_latency()
            if not self._repository:
                raise RuntimeError("Appointment repository not configured")
            if not await self._repository.delete(appointment_id):
                logger.debug("Appointment %s was already absent", appointment_id)
            return

        try:
            await self._client.delete(f"/agendamentos/{appointment_id}")
        except DownstreamServiceError as exc:
            if exc.status_code != 404:
                raise
            logger.debug("Appointment %s was already absent", appointment_id)
