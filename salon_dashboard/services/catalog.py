from __future__ import annotations

import logging
from typing import List

from salon_dashboard.clients.backend import SalonBackendClient
from salon_dashboard.schemas.catalog import CatalogService, CatalogServiceInput
from salon_dashboard.services.exceptions import (
    DownstreamServiceError,
    RecordNotFoundError,
)
from salon_dashboard.services.memory_store import CatalogRepository, get_store

logger = logging.getLogger(__name__)


class ServiceCatalogService:
    """Price list of the services offered by the shop."""

    def __init__(
        self,
        client: SalonBackendClient,
        *,
        repository: CatalogRepository | None = None,
    ) -> None:
        self._client = client
        self._repository = repository
        if self._client.use_local_store:
            self._repository = repository or get_store().catalog

    def _local_repository(self) -> CatalogRepository:
        if not self._repository:
            raise RuntimeError("Catalog repository not configured")
        return self._repository

    async def list(self) -> List[CatalogService]:
        logger.info("Listing catalog services")
        if self._client.use_local_store:
            await self._client.simulate_latency()
            return await self._local_repository().list()

        data = await self._client.get("/servicos")
        return [CatalogService.model_validate(item) for item in data]

    async def create(self, request: CatalogServiceInput) -> CatalogService:
        logger.info("Adding catalog service '%s'", request.nome)
        if self._client.use_local_store:
            await self._client.simulate_latency()
            return await self._local_repository().create(request)

        data = await self._client.post("/servicos", request.model_dump())
        return CatalogService.model_validate(data)

    async def update(self, service_id: int, request: CatalogServiceInput) -> CatalogService:
        logger.info("Updating catalog service %s", service_id)
        if self._client.use_local_store:
            await self._client.simulate_latency()
            updated = await self._local_repository().update(service_id, request)
            if updated is None:
                raise RecordNotFoundError("Serviço não encontrado.")
            return updated

        try:
            await self._client.put(f"/servicos/{service_id}", request.model_dump())
        except DownstreamServiceError as exc:
            if exc.status_code == 404:
                raise RecordNotFoundError("Serviço não encontrado.", cause=exc) from exc
            raise
        return CatalogService(id=service_id, **request.model_dump())

    async def delete(self, service_id: int) -> None:
        logger.info("Removing catalog service %s", service_id)
        if self._client.use_local_store:
            await self._client.simulate_latency()
            await self._local_repository().delete(service_id)
            return

        try:
            await self._client.delete(f"/servicos/{service_id}")
        except DownstreamServiceError as exc:
            if exc.status_code != 404:
                raise
            logger.debug("Catalog service %s was already absent", service_id)
