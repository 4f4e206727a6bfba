# app/routes/order.py

from fastapi import APIRouter, Path, Request, status
from typing import List
from app.schemas.order import Order, OrderCreate, OrderStatusUpdate
from app.services.order import (
    create_order_service,
    read_orders_service,
    update_order_status_service,
)

router = APIRouter()

# ID должен помещаться в 64-битное целое базы
MAX_ID = 2**63 - 1

# ────────────── CREATE ──────────────
@router.post(
    "",
    response_model=Order,
    status_code=status.HTTP_201_CREATED,
    summary="Создать заказ",
    response_description="Возвращает сохранённый заказ",
    responses={
        201: {"description": "Заказ успешно создан"},
        400: {"description": "Неверные данные заказа или база отклонила запись"},
        500: {"description": "Внутренняя ошибка сервера"},
    },
)
async def create_order(request: Request, order: OrderCreate):
    try:
        return await create_order_service(order, request)
    except Exception as e:
        await request.app.state.log.log_error("order", f"Ошибка при создании заказа: {str(e)}")
        raise


# ────────────── READ ALL ──────────────
@router.get(
    "",
    response_model=List[Order],
    status_code=status.HTTP_200_OK,
    summary="Получить список заказов",
    response_description="Возвращает список всех заказов",
    responses={
        200: {"description": "Список заказов успешно получен"},
        500: {"description": "Внутренняя ошибка сервера"},
    },
)
async def read_orders(request: Request):
    try:
        orders = await read_orders_service(request)
        return orders
    except Exception as e:
        await request.app.state.log.log_error("order", f"Ошибка при получении списка заказов: {str(e)}")
        raise


# ────────────── UPDATE STATUS ──────────────
@router.post(
    "/{id}/status",
    response_model=Order,
    status_code=status.HTTP_200_OK,
    summary="Обновить статус заказа",
    response_description="Возвращает заказ с новым статусом",
    responses={
        200: {"description": "Статус обновлён"},
        400: {"description": "Некорректный ID или ошибка обновления"},
        404: {"description": "Заказ не найден"},
        500: {"description": "Внутренняя ошибка сервера"},
    },
)
async def update_order_status(
    body: OrderStatusUpdate,
    request: Request,
    id: int = Path(..., ge=0, le=MAX_ID),
):
    try:
        return await update_order_status_service(id, body.status, request)
    except Exception as e:
        await request.app.state.log.log_error("order", f"Ошибка при обновлении статуса заказа: {str(e)}", {"id": id})
        raise
