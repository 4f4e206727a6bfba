# app/schemas/product.py

from pydantic import BaseModel, ConfigDict

# ────────────── Базовая схема ──────────────
class ProductBase(BaseModel):
    name: str
    price: str          # цена хранится строкой, как её ввёл администратор
    image: str          # URL или data-URI
    description: str

# ────────────── Схема для CREATE ──────────────
class ProductCreate(ProductBase):
    model_config = ConfigDict(extra="forbid")

# ────────────── Схема для RESPONSE ──────────────
class Product(ProductBase):
    id: int

    model_config = ConfigDict(from_attributes=True)

class MessageResponse(BaseModel):
    message: str
