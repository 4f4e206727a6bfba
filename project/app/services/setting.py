# app/services/setting.py

from sqlalchemy.future import select
from fastapi import Request

from app.models.setting import Setting as SettingModel


async def read_settings_service(request: Request) -> dict[str, str | None]:
    """
    Все настройки магазина одним словарём {key: value}.
    Значения по умолчанию не подставляются.
    """
    db = request.state.db
    log = request.app.state.log

    result = await db.execute(select(SettingModel))
    settings = {row.key: row.value for row in result.scalars().all()}

    await log.log_info("setting", "Настройки загружены", {"keys": sorted(settings)})
    return settings


async def upsert_setting_service(key: str, value: str, request: Request) -> SettingModel:
    """
    Обновляет настройку по ключу или создаёт её, если ключа ещё нет.
    """
    db = request.state.db
    log = request.app.state.log

    result = await db.execute(select(SettingModel).where(SettingModel.key == key))
    db_setting = result.scalar_one_or_none()
    if db_setting is None:
        db_setting = SettingModel(key=key, value=value)
        db.add(db_setting)
    else:
        db_setting.value = value

    await db.commit()
    await db.refresh(db_setting)

    await log.log_info("setting", "Настройка сохранена", {"key": key})
    return db_setting
