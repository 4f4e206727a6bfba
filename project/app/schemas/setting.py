# app/schemas/setting.py

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SHOP_LOGO = "shopLogo"
SHOP_NAME = "shopName"


class Setting(BaseModel):
    """Строка настроек магазина в ответе API."""
    key: str
    value: str | None = None

    model_config = ConfigDict(from_attributes=True)


class LogoUpdate(BaseModel):
    logo_url: str = Field(..., description="URL или data-URI логотипа")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class NameUpdate(BaseModel):
    name: str = Field(..., description="Название магазина")

    model_config = ConfigDict(extra="forbid")
