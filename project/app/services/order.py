# app/services/order.py

from datetime import datetime, timezone
from sqlalchemy.future import select
from sqlalchemy.exc import DataError, IntegrityError
from fastapi import HTTPException, Request

from app.models.order import Order as OrderModel
from app.schemas.order import OrderCreate

# ошибки, которые означают отказ базы принять данные (400), а не её недоступность
STORE_REJECTIONS = (IntegrityError, DataError)


async def read_orders_service(request: Request) -> list[OrderModel]:
    """
    Получение списка заказов
    """
    db = request.state.db
    log = request.app.state.log

    result = await db.execute(select(OrderModel).order_by(OrderModel.id))
    orders = result.scalars().all()

    await log.log_info("order", f"{len(orders)} заказов загружено")
    return orders


async def create_order_service(order: OrderCreate, request: Request) -> OrderModel:
    """
    Создание нового заказа.
    Если дата не передана, ставится текущее время; статус по умолчанию Pending.
    """
    db = request.state.db
    log = request.app.state.log

    data = order.model_dump()
    if data["order_date"] is None:
        data["order_date"] = datetime.now(timezone.utc)

    db_order = OrderModel(**data)
    db.add(db_order)
    try:
        await db.commit()
    except STORE_REJECTIONS as e:
        await db.rollback()
        await log.log_error("order", "База отклонила заказ", {"error": str(e)})
        raise HTTPException(status_code=400, detail={"message": "Failed to create order.", "error": str(e)})
    await db.refresh(db_order)

    await log.log_info("order", "Заказ создан", {"id": db_order.id, "total": db_order.total})
    return db_order


async def update_order_status_service(id: int, status: str, request: Request) -> OrderModel:
    """
    Замена статуса заказа по ID. Любая строка принимается как статус.
    """
    db = request.state.db
    log = request.app.state.log

    result = await db.execute(select(OrderModel).where(OrderModel.id == id))
    db_order = result.scalar_one_or_none()
    if db_order is None:
        await log.log_error("order", "Заказ не найден для обновления статуса", {"id": id})
        raise HTTPException(status_code=404, detail="Order not found.")

    db_order.status = status
    try:
        await db.commit()
    except STORE_REJECTIONS as e:
        await db.rollback()
        await log.log_error("order", "База отклонила новый статус", {"id": id, "error": str(e)})
        raise HTTPException(status_code=400, detail={"message": "Failed to update order status.", "error": str(e)})
    await db.refresh(db_order)

    await log.log_info("order", "Статус заказа обновлён", {"id": id, "status": status})
    return db_order
