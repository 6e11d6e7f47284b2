from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from salon_dashboard.clients.backend import SalonBackendClient
from salon_dashboard.config import Settings, get_settings
from salon_dashboard.services import (
    AppointmentService,
    LoginService,
    ReportService,
    ServiceCatalogService,
    ShopConfigService,
)
from salon_dashboard.services.reports import local_clock


@lru_cache(maxsize=1)
def get_backend_client_cached() -> SalonBackendClient:
    settings = get_settings()
    return SalonBackendClient(
        settings.backend_base_url,
        timeout=settings.backend_timeout,
        use_local_store=settings.use_local_store,
    )


def get_backend_client(settings: Settings = Depends(get_settings)) -> SalonBackendClient:
    return get_backend_client_cached()


def get_appointment_service(
    client: SalonBackendClient = Depends(get_backend_client),
) -> AppointmentService:
    return AppointmentService(client)


def get_catalog_service(
    client: SalonBackendClient = Depends(get_backend_client),
) -> ServiceCatalogService:
    return ServiceCatalogService(client)


def get_shop_config_service(
    client: SalonBackendClient = Depends(get_backend_client),
) -> ShopConfigService:
    return ShopConfigService(client)


def get_report_service(
    appointments: AppointmentService = Depends(get_appointment_service),
    shop_config: ShopConfigService = Depends(get_shop_config_service),
    settings: Settings = Depends(get_settings),
) -> ReportService:
    return ReportService(
        appointments,
        shop_config,
        clock=local_clock(settings.shop_timezone),
    )


def get_login_service(
    shop_config: ShopConfigService = Depends(get_shop_config_service),
    settings: Settings = Depends(get_settings),
) -> LoginService:
    return LoginService(settings, shop_config)
