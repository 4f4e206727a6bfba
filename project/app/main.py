# app/main.py

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
from dotenv import load_dotenv
from contextlib import asynccontextmanager

# --- загрузка переменных окружения (до чтения settings) ---
load_dotenv()

from app.config import settings
from app.utils.log import Log
from app.utils.ids import ProductIdGenerator
from app.utils.database import init_db, close_db
from app.utils.errors import register_exception_handlers
from app.middleware.db_middleware import DBSessionMiddleware

import os
import multiprocessing

# --- sync логгер для раннего старта ---
boot_log = Log()
if os.environ.get("RUN_MAIN") == "true" or multiprocessing.current_process().name == "MainProcess":
    boot_log.log_info_sync(target="startup", message="Импорты main.py выполнены")

# ────────────── Lifespan ──────────────
@asynccontextmanager
async def lifespan(app: FastAPI):
    boot_log.log_info_sync(target="startup", message="lifespan: startup начат")

    # Подключение к БД и создание таблиц
    await init_db(app)
    boot_log.log_info_sync(target="startup", message="База инициализирована")

    app.state.product_ids = ProductIdGenerator()

    app.state.log = Log()
    await app.state.log.log_info(target="startup", message="Async Log инициализирован")

    yield

    # shutdown
    await app.state.log.log_info(target="shutdown", message="Остановка приложения")
    await close_db(app)
    await app.state.log.shutdown()
    boot_log.log_info_sync(target="shutdown", message="Соединение с базой закрыто, Log завершён")

# ────────────── Создаём FastAPI приложение ──────────────
app = FastAPI(title="Shop API", lifespan=lifespan)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# DB middleware для request.state.db
app.add_middleware(DBSessionMiddleware)

register_exception_handlers(app)

@app.get("/")
def read_root():
    return {"message": "Shop API is running"}

# ────────────── Подключение роутов ──────────────
from app.routes import product, setting, order

app.include_router(product.router, prefix="/products", tags=["products"])
app.include_router(setting.router, prefix="/settings", tags=["settings"])
app.include_router(order.router, prefix="/orders", tags=["orders"])

# ────────────── Запуск uvicorn ──────────────
if __name__ == "__main__":
    boot_log.log_info_sync(target="startup", message=f"Запуск uvicorn на http://{settings.HOST}:{settings.PORT}")
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level="info",
    )
