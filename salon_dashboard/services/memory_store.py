from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Protocol

from salon_dashboard.schemas.appointment import (
    Appointment,
    AppointmentCreate,
    AppointmentListRequest,
    AppointmentStatus,
)
from salon_dashboard.schemas.catalog import CatalogService, CatalogServiceInput
from salon_dashboard.schemas.shop_config import (
    AdminProfile,
    OperatingHours,
    ShopConfig,
    ShopConfigUpdate,
    ShopDetails,
)

_AVATAR_URL = "https://ui-avatars.com/api/?name={name}"


def avatar_url(name: str, *, background: str | None = None) -> str:
    url = _AVATAR_URL.format(name=name.replace(" ", "+", 1))
    if background:
        url = f"{url}&background={background}"
    return url


class AppointmentStore(Protocol):
    async def list(self, request: AppointmentListRequest | None = None) -> List[Appointment]:
        """Return appointments in creation order."""

    async def get(self, appointment_id: int) -> Optional[Appointment]:
        ...

    async def create(self, request: AppointmentCreate) -> Appointment:
        ...

    async def update_status(
        self, appointment_id: int, status: AppointmentStatus
    ) -> Optional[Appointment]:
        ...

    async def delete(self, appointment_id: int) -> bool:
        ...


class ShopConfigStore(Protocol):
    async def get(self) -> ShopConfig:
        ...

    async def update(self, request: ShopConfigUpdate) -> ShopConfig:
        ...


class _BaseRepository:
    def __init__(self) -> None:
        self._counter = itertools.count(1)

    def _next_id(self) -> int:
        return next(self._counter)


class AppointmentRepository(_BaseRepository):
    def __init__(self, seeds: Iterable[AppointmentCreate] | None = None) -> None:
        super().__init__()
        self._appointments: Dict[int, Appointment] = {}
        if seeds is None:
            seeds = self._default_seeds()
        for seed in seeds:
            self._insert(seed)

    @staticmethod
    def _default_seeds() -> List[AppointmentCreate]:
        return [
            AppointmentCreate(
                nome="João Silva",
                servico="Corte + Barba",
                horario="09:00",
                data="2025-07-30",
                preco="R$ 55,00",
            )
        ]

    def _insert(self, request: AppointmentCreate) -> Appointment:
        appointment = Appointment(
            id=self._next_id(),
            client_name=request.client_name,
            service_name=request.service_name,
            status=AppointmentStatus.scheduled,
            date=request.date,
            time=request.time,
            price=request.price,
            avatar=avatar_url(request.client_name, background="random"),
        )
        self._appointments[appointment.id] = appointment
        return appointment

    async def list(self, request: AppointmentListRequest | None = None) -> List[Appointment]:
        items = list(self._appointments.values())
        if request is None:
            return [item.model_copy() for item in items]

        term = (request.search or "").strip().lower()
        filtered = []
        for item in items:
            if term and term not in item.client_name.lower() and term not in item.service_name.lower():
                continue
            if request.status is not None and item.status != request.status:
                continue
            filtered.append(item.model_copy())
        return filtered

    async def get(self, appointment_id: int) -> Optional[Appointment]:
        appointment = self._appointments.get(appointment_id)
        return appointment.model_copy() if appointment is not None else None

    async def create(self, request: AppointmentCreate) -> Appointment:
        return self._insert(request).model_copy()

    async def update_status(
        self, appointment_id: int, status: AppointmentStatus
    ) -> Optional[Appointment]:
        appointment = self._appointments.get(appointment_id)
        if appointment is None:
            return None
        appointment.status = status
        return appointment.model_copy()

    async def delete(self, appointment_id: int) -> bool:
        return self._appointments.pop(appointment_id, None) is not None


class CatalogRepository(_BaseRepository):
    def __init__(self) -> None:
        super().__init__()
        self._services: Dict[int, CatalogService] = {}
        self._seed_defaults()

    def _seed_defaults(self) -> None:
        seeds = [
            ("Corte Masculino", "35,00"),
            ("Barba", "25,00"),
            ("Corte + Barba", "60,00"),
            ("Platinado", "80,00"),
        ]
        for name, price in seeds:
            service_id = self._next_id()
            self._services[service_id] = CatalogService(id=service_id, nome=name, preco=price)

    async def list(self) -> List[CatalogService]:
        return [service.model_copy() for service in self._services.values()]

    async def get(self, service_id: int) -> Optional[CatalogService]:
        service = self._services.get(service_id)
        return service.model_copy() if service is not None else None

    async def create(self, request: CatalogServiceInput) -> CatalogService:
        service = CatalogService(id=self._next_id(), nome=request.nome, preco=request.preco)
        self._services[service.id] = service
        return service.model_copy()

    async def update(
        self, service_id: int, request: CatalogServiceInput
    ) -> Optional[CatalogService]:
        if service_id not in self._services:
            return None
        service = CatalogService(id=service_id, nome=request.nome, preco=request.preco)
        self._services[service_id] = service
        return service.model_copy()

    async def delete(self, service_id: int) -> bool:
        return self._services.pop(service_id, None) is not None


class ShopConfigRepository:
    def __init__(self, config: ShopConfig | None = None) -> None:
        self._config = config or ShopConfig(
            hours=OperatingHours(), shop=ShopDetails(), profile=AdminProfile()
        )

    async def get(self) -> ShopConfig:
        return self._config.model_copy(deep=True)

    async def update(self, request: ShopConfigUpdate) -> ShopConfig:
        if request.hours is not None:
            self._config.hours = request.hours.model_copy()
        if request.shop is not None:
            self._config.shop = request.shop.model_copy()
        if request.profile is not None:
            self._config.profile = request.profile.model_copy()
        return self._config.model_copy(deep=True)


@dataclass
class MemoryDataStore:
    appointments: AppointmentRepository
    catalog: CatalogRepository
    shop_config: ShopConfigRepository


_store: Optional[MemoryDataStore] = None


def get_store() -> MemoryDataStore:
    global _store
    if _store is None:
        _store = MemoryDataStore(
            appointments=AppointmentRepository(),
            catalog=CatalogRepository(),
            shop_config=ShopConfigRepository(),
        )
    return _store


def reset_store() -> None:
    global _store
    _store = None
