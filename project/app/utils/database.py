# app/utils/database.py

from fastapi import FastAPI
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import declarative_base
from app.config import settings

# ────────────── Base для моделей ──────────────
Base = declarative_base()  # базовый класс для всех моделей SQLAlchemy


# ────────────── Инициализация базы данных ──────────────
async def init_db(app: FastAPI) -> None:
    """
    Открывает соединение с базой при старте приложения:
        • создаёт асинхронный движок по settings.DATABASE_URL
        • создаёт таблицы products, settings, orders (если ещё не созданы)
        • кладёт движок и фабрику сессий в app.state
    """
    # модели должны быть импортированы до create_all
    from app.models import product, setting, order  # noqa: F401

    engine = create_async_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    app.state.engine = engine
    app.state.sessionmaker = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False  # объекты остаются читаемыми после commit
    )


# ────────────── Закрытие соединения ──────────────
async def close_db(app: FastAPI) -> None:
    engine = getattr(app.state, "engine", None)
    if engine is not None:
        await engine.dispose()
