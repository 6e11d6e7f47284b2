from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OperatingHours(BaseModel):
    """Opening and closing time as ``HH:MM`` strings."""

    model_config = ConfigDict(populate_by_name=True)

    opening: str = Field(default="09:00", alias="abertura")
    closing: str = Field(default="20:00", alias="fechamento")


class ShopDetails(BaseModel):
    nome: str = "Pride Barbers"
    endereco: str = "Rua das Navais, 123 - Centro"
    telefone: str = "(11) 99999-0000"
    email: str = "contato@pridebarbers.com"


class AdminProfile(BaseModel):
    nome: str = "Mestre Barbeiro"
    email: str = "admin@admin.com"


class ShopConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    hours: Optional[OperatingHours] = Field(default=None, alias="horarios")
    shop: Optional[ShopDetails] = Field(default=None, alias="dadosBarbearia")
    profile: Optional[AdminProfile] = Field(default=None, alias="perfil")


class ShopConfigUpdate(BaseModel):
    """Partial update; omitted sections are left untouched."""

    model_config = ConfigDict(populate_by_name=True)

    hours: Optional[OperatingHours] = Field(default=None, alias="horarios")
    shop: Optional[ShopDetails] = Field(default=None, alias="dadosBarbearia")
    profile: Optional[AdminProfile] = Field(default=None, alias="perfil")


class ShopConfigUpdateResponse(BaseModel):
    message: str
    dados: ShopConfig
