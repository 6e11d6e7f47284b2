"""Service package public API definitions.

Service implementations are imported lazily: ``salon_dashboard.clients.backend``
imports ``salon_dashboard.services.exceptions``, and importing the services
eagerly here would loop back into the client module during start up.
"""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING, Any

__all__ = [
    "AppointmentService",
    "LoginService",
    "ReportService",
    "ServiceCatalogService",
    "ShopConfigService",
]

_SERVICE_MODULES = {
    "AppointmentService": "appointment",
    "LoginService": "auth",
    "ReportService": "reports",
    "ServiceCatalogService": "catalog",
    "ShopConfigService": "shop_config",
}


def __getattr__(name: str) -> Any:
    if name not in _SERVICE_MODULES:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module = import_module(f".{_SERVICE_MODULES[name]}", __name__)
    attr = getattr(module, name)
    globals()[name] = attr
    return attr


if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from .appointment import AppointmentService as AppointmentService
    from .auth import LoginService as LoginService
    from .catalog import ServiceCatalogService as ServiceCatalogService
    from .reports import ReportService as ReportService
    from .shop_config import ShopConfigService as ShopConfigService
