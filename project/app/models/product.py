# app/models/product.py

from sqlalchemy import Column, BigInteger, String, Text
from app.utils.database import Base

class Product(Base):
    __tablename__ = "products"

    # id генерируется приложением (миллисекунды эпохи), не базой
    id = Column(BigInteger, primary_key=True, autoincrement=False)

    name        = Column(String, nullable=True)     # Название
    price       = Column(String, nullable=True)     # Цена (строкой, без арифметики)
    image       = Column(Text, nullable=True)       # URL или data-URI
    description = Column(Text, nullable=True)       # Описание
