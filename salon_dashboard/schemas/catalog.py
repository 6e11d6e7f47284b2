from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator


def _price_to_text(value: Union[str, int, float, None]) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    return f"{float(value):.2f}".replace(".", ",")


class CatalogService(BaseModel):
    id: int
    nome: str
    preco: Optional[str] = None

    @field_validator("preco", mode="before")
    @classmethod
    def _coerce_price(cls, value: Union[str, int, float, None]) -> Optional[str]:
        return _price_to_text(value)


class CatalogServiceInput(BaseModel):
    """Payload used both to add and to edit a catalog entry."""

    nome: str = Field(..., min_length=1)
    preco: Optional[str] = Field(default=None, description="Display price, e.g. '35,00'")

    @field_validator("preco", mode="before")
    @classmethod
    def _coerce_price(cls, value: Union[str, int, float, None]) -> Optional[str]:
        return _price_to_text(value)
