# app/routes/product.py

from fastapi import APIRouter, Path, Request, status
from typing import List
from app.schemas.product import Product, ProductCreate, MessageResponse
from app.services.product import (
    read_products_service,
    create_product_service,
    delete_product_service,
)

router = APIRouter()

# ID должен помещаться в 64-битное целое базы
MAX_ID = 2**63 - 1

# ────────────── READ ALL ──────────────
@router.get(
    "",
    response_model=List[Product],
    status_code=status.HTTP_200_OK,
    summary="Получить каталог товаров",
    response_description="Возвращает все товары",
    responses={
        200: {"description": "Каталог успешно получен"},
        500: {"description": "Внутренняя ошибка сервера"},
    },
)
async def read_products(request: Request):
    try:
        return await read_products_service(request)
    except Exception as e:
        await request.app.state.log.log_error("product", f"Ошибка при получении каталога: {str(e)}")
        raise


# ────────────── CREATE ──────────────
@router.post(
    "",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    summary="Добавить товар",
    response_description="Возвращает созданный товар с числовым ID",
    responses={
        201: {"description": "Товар успешно создан"},
        400: {"description": "Неверные данные запроса"},
        500: {"description": "Внутренняя ошибка сервера"},
    },
)
async def create_product(request: Request, product: ProductCreate):
    try:
        return await create_product_service(product, request)
    except Exception as e:
        await request.app.state.log.log_error("product", f"Ошибка при создании товара: {str(e)}")
        raise


# ────────────── DELETE ──────────────
@router.delete(
    "/{id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Удалить товар",
    responses={
        200: {"description": "Товар успешно удалён"},
        400: {"description": "ID не является числом"},
        404: {"description": "Товар не найден"},
        500: {"description": "Внутренняя ошибка сервера"},
    },
)
async def delete_product(request: Request, id: int = Path(..., ge=0, le=MAX_ID)):
    try:
        await delete_product_service(id, request)
        return {"message": "Product deleted successfully."}
    except Exception as e:
        await request.app.state.log.log_error("product", f"Ошибка при удалении товара: {str(e)}", {"id": id})
        raise
