from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AppointmentStatus(str, Enum):
    scheduled = "Agendado"
    in_progress = "Em Andamento"
    completed = "Concluído"


class Appointment(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    client_name: str = Field(alias="nome")
    service_name: str = Field(alias="servico")
    status: AppointmentStatus = AppointmentStatus.scheduled
    date: Optional[str] = Field(default=None, alias="data")  # ISO date
    time: Optional[str] = Field(default=None, alias="horario")  # HH:MM
    price: Optional[str] = Field(default=None, alias="preco")
    avatar: Optional[str] = None

    @field_validator("price", mode="before")
    @classmethod
    def _coerce_price(cls, value: Union[str, int, float, None]) -> Optional[str]:
        if value is None or isinstance(value, str):
            return value
        return str(value)


class AppointmentCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    client_name: str = Field(..., min_length=1, alias="nome")
    service_name: str = Field(..., min_length=1, alias="servico")
    date: str = Field(..., alias="data")
    time: str = Field(..., alias="horario")
    price: Optional[str] = Field(default=None, alias="preco")

    @field_validator("price", mode="before")
    @classmethod
    def _coerce_price(cls, value: Union[str, int, float, None]) -> Optional[str]:
        if value is None or isinstance(value, str):
            return value
        return str(value)


class AppointmentStatusUpdate(BaseModel):
    status: AppointmentStatus


class AppointmentListRequest(BaseModel):
    search: Optional[str] = None  # matches client or service name
    status: Optional[AppointmentStatus] = None


class MessageResponse(BaseModel):
    message: str
