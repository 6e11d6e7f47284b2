from __future__ import annotations

import logging

from salon_dashboard.clients.backend import SalonBackendClient
from salon_dashboard.schemas.shop_config import ShopConfig, ShopConfigUpdate
from salon_dashboard.services.exceptions import ServiceError
from salon_dashboard.services.memory_store import ShopConfigStore, get_store

logger = logging.getLogger(__name__)


class ShopConfigService:
    def __init__(
        self,
        client: SalonBackendClient,
        *,
        repository: ShopConfigStore | None = None,
    ) -> None:
        self._client = client
        self._repository = repository
        if self._client.use_local_store:
            self._repository = repository or get_store().shop_config

    async def get(self) -> ShopConfig:
        logger.debug("Loading shop configuration")
        if self._client.use_local_store:
            await self._client.simulate_latency()
            if not self._repository:
                raise RuntimeError("Shop config repository not configured")
            return await self._repository.get()

        try:
            data = await self._client.get("/config")
            return ShopConfig.model_validate(data)
        except ServiceError:
            raise
        except Exception as exc:  # pragma: no cover - unexpected payload
            logger.exception("Unexpected error while loading shop configuration")
            raise ServiceError("Failed to load shop configuration", cause=exc)

    async def update(self, request: ShopConfigUpdate) -> ShopConfig:
        sections = sorted(request.model_dump(exclude_none=True, by_alias=True))
        logger.info("Saving shop configuration sections %s", sections)
        if self._client.use_local_store:
            await self._client.simulate_latency()
            if not self._repository:
                raise RuntimeError("Shop config repository not configured")
            return await self._repository.update(request)

        try:
            data = await self._client.put(
                "/config", request.model_dump(exclude_none=True, by_alias=True)
            )
            return ShopConfig.model_validate(data.get("dados", data))
        except ServiceError:
            raise
        except Exception as exc:  # pragma: no cover - unexpected payload
            logger.exception("Unexpected error while saving shop configuration")
            raise ServiceError("Failed to save shop configuration", cause=exc)
