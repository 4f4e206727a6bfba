# app/schemas/order.py

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class OrderStatus:
    """
    Известные статусы заказа.
    Сервер их не проверяет: поле status принимает любую строку.
    """
    PENDING = "Pending"
    APPROVED = "Approved"
    CANCELLED = "Cancelled"


class CamelModel(BaseModel):
    # snake_case в Python, camelCase в JSON
    # NaN и Infinity не сохраняются в базе как числа
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False)


# ────────────── Позиция заказа ──────────────
class LineItem(CamelModel):
    id: int
    name: str
    price: str
    quantity: int

    model_config = ConfigDict(extra="forbid")


# ────────────── Базовая схема ──────────────
class OrderBase(CamelModel):
    customer_name: str
    phone_number: str
    address: str
    payment_method: str
    upi_screenshot: Optional[str] = None
    products: List[LineItem]
    total: float

# ────────────── Схема для CREATE ──────────────
class OrderCreate(OrderBase):
    order_date: Optional[datetime] = None
    status: str = OrderStatus.PENDING

    model_config = ConfigDict(extra="forbid")

# ────────────── Схема для обновления статуса ──────────────
class OrderStatusUpdate(CamelModel):
    status: str = Field(..., description="Новый статус, например Approved или Cancelled")

    model_config = ConfigDict(extra="forbid")

# ────────────── Схема для RESPONSE ──────────────
class Order(OrderBase):
    id: int
    order_date: datetime
    status: str

    model_config = ConfigDict(from_attributes=True)
