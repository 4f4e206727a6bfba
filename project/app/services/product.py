# app/services/product.py

from sqlalchemy.future import select
from fastapi import HTTPException, Request

from app.models.product import Product as ProductModel
from app.schemas.product import ProductCreate


async def read_products_service(request: Request) -> list[ProductModel]:
    """
    Получение всего каталога.
    """
    db = request.state.db
    log = request.app.state.log

    result = await db.execute(select(ProductModel))
    products = result.scalars().all()

    await log.log_info("product", f"{len(products)} товаров загружено")
    return products


async def create_product_service(product: ProductCreate, request: Request) -> ProductModel:
    """
    Создание товара. ID выдаёт app.state.product_ids.
    """
    db = request.state.db
    log = request.app.state.log

    db_product = ProductModel(id=request.app.state.product_ids.next_id(), **product.model_dump())
    db.add(db_product)
    await db.commit()
    await db.refresh(db_product)

    await log.log_info("product", "Товар создан", {"id": db_product.id, "name": db_product.name})
    return db_product


async def delete_product_service(id: int, request: Request) -> None:
    """
    Удаление товара по его числовому ID (точное совпадение).
    """
    db = request.state.db
    log = request.app.state.log

    result = await db.execute(select(ProductModel).where(ProductModel.id == id))
    db_product = result.scalars().first()
    if db_product is None:
        await log.log_error("product", "Товар не найден для удаления", {"id": id})
        raise HTTPException(status_code=404, detail="Product not found.")

    await db.delete(db_product)
    await db.commit()
    await log.log_info("product", "Товар удалён", {"id": id})
