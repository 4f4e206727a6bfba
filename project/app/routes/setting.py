# app/routes/setting.py

from fastapi import APIRouter, Request, status
from typing import Dict, Optional
from app.schemas.setting import Setting, LogoUpdate, NameUpdate, SHOP_LOGO, SHOP_NAME
from app.services.setting import read_settings_service, upsert_setting_service

router = APIRouter()

# ────────────── READ ──────────────
@router.get(
    "",
    response_model=Dict[str, Optional[str]],
    status_code=status.HTTP_200_OK,
    summary="Получить настройки магазина",
    response_description="Словарь {key: value}, отсутствующие ключи не возвращаются",
    responses={
        200: {"description": "Настройки получены", "content": {"application/json": {"example": {"shopLogo": "https://example.com/logo.png", "shopName": "My Shop"}}}},
        500: {"description": "Внутренняя ошибка сервера"},
    },
)
async def read_settings(request: Request):
    try:
        return await read_settings_service(request)
    except Exception as e:
        await request.app.state.log.log_error("setting", f"Ошибка при получении настроек: {str(e)}")
        raise


# ────────────── LOGO ──────────────
@router.post(
    "/logo",
    response_model=Setting,
    status_code=status.HTTP_200_OK,
    summary="Обновить логотип магазина",
    responses={
        200: {"description": "Логотип сохранён"},
        400: {"description": "Неверные данные запроса"},
        500: {"description": "Внутренняя ошибка сервера"},
    },
)
async def update_logo(request: Request, body: LogoUpdate):
    try:
        return await upsert_setting_service(SHOP_LOGO, body.logo_url, request)
    except Exception as e:
        await request.app.state.log.log_error("setting", f"Ошибка при сохранении логотипа: {str(e)}")
        raise


# ────────────── NAME ──────────────
@router.post(
    "/name",
    response_model=Setting,
    status_code=status.HTTP_200_OK,
    summary="Обновить название магазина",
    responses={
        200: {"description": "Название сохранено"},
        400: {"description": "Неверные данные запроса"},
        500: {"description": "Внутренняя ошибка сервера"},
    },
)
async def update_name(request: Request, body: NameUpdate):
    try:
        return await upsert_setting_service(SHOP_NAME, body.name, request)
    except Exception as e:
        await request.app.state.log.log_error("setting", f"Ошибка при сохранении названия: {str(e)}")
        raise
