from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import jwt

from salon_dashboard.config import Settings
from salon_dashboard.schemas.auth import LoggedUser, LoginRequest, LoginResponse
from salon_dashboard.services.exceptions import ServiceError
from salon_dashboard.services.memory_store import avatar_url
from salon_dashboard.services.shop_config import ShopConfigService

logger = logging.getLogger(__name__)


class InvalidCredentialsError(ServiceError):
    """Raised when the login pair is neither blank nor the configured admin."""


def create_access_token(data: Dict[str, Any], settings: Settings) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.token_expire_minutes)
    to_encode["exp"] = expire
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


class LoginService:
    """Placeholder login: blank credentials or the configured admin pair."""

    def __init__(self, settings: Settings, shop_config: ShopConfigService) -> None:
        self._settings = settings
        self._shop_config = shop_config

    def _accepts(self, request: LoginRequest) -> bool:
        if request.email == "" and request.password == "":
            return True
        return (
            request.email == self._settings.admin_email
            and request.password == self._settings.admin_password
        )

    async def login(self, request: LoginRequest) -> LoginResponse:
        if not self._accepts(request):
            logger.info("Rejected login for '%s'", request.email)
            raise InvalidCredentialsError("Login inválido!")

        config = await self._shop_config.get()
        name = config.profile.nome if config.profile else "Admin"
        token = create_access_token({"role": "admin"}, self._settings)
        logger.info("Issued admin token for '%s'", request.email or "<blank>")
        return LoginResponse(
            auth=True,
            token=token,
            user=LoggedUser(nome=name, avatar=avatar_url(name)),
        )
