# app/models/order.py

from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, Text, Float, DateTime, JSON
from app.utils.database import Base

class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)  # автоинкремент

    customer_name  = Column(String, nullable=True)              # Покупатель
    phone_number   = Column(String, nullable=True)              # Телефон
    address        = Column(Text, nullable=True)                # Адрес доставки
    payment_method = Column(String, nullable=True)              # Способ оплаты
    upi_screenshot = Column(Text, nullable=True)                # Скриншот оплаты (base64)
    order_date     = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    status         = Column(String, nullable=False, default="Pending")
    products       = Column(JSON, nullable=False, default=list) # Позиции [{id, name, price, quantity}]
    total          = Column(Float, nullable=True)               # Сумма
