# app/utils/log.py
# Логирование событий магазина в файлы LOG_DIR/ГГГГ/ММ/ДД.log

import os
import datetime
import logging
from aiologger import Logger
from aiologger.handlers.files import AsyncFileHandler
from app.config import settings


class Log:
    def __init__(self, log_dir: str | None = None, log_print: str | None = None):
        self.log_dir = log_dir or settings.LOG_DIR
        os.makedirs(self.log_dir, exist_ok=True)
        self.handlers = {}
        flag = settings.LOG_PRINT if log_print is None else log_print
        self.log_print = str(flag).lower() in ("1", "true", "yes")

    def build_log_path(self, now: datetime.datetime) -> str:
        """
        Путь к лог-файлу за день:
        app/log/2025/10/04.log
        """
        base_dir = os.path.join(self.log_dir, f"{now.year}", f"{now:%m}")
        os.makedirs(base_dir, exist_ok=True)
        return os.path.join(base_dir, f"{now:%d}.log")

    def format_line(self, now: datetime.datetime, target: str, message: str, data: dict | None) -> str:
        line = f"{now:%d.%m.%Y %H:%M:%S} {target}: {message}"
        if data:
            line += f": {self.safe_serialize(data)}"
        return line

    def echo(self, line: str, is_console: bool | None):
        should_print = self.log_print if is_console is None else is_console
        if should_print:
            print(line)

    async def get_logger(self, target: str, now: datetime.datetime) -> Logger:
        """Асинхронный логгер для target; при смене дня файл переоткрывается."""
        log_path = self.build_log_path(now)
        current = self.handlers.get(target)

        if current is None or current["path"] != log_path:
            if current is not None:
                await current["logger"].shutdown()

            target_logger = Logger(name=f"shop_{target}")
            target_logger.add_handler(AsyncFileHandler(filename=log_path, mode="a", encoding="utf-8"))
            self.handlers[target] = {"path": log_path, "logger": target_logger}

        return self.handlers[target]["logger"]

    # ────────────── Асинхронное ──────────────
    async def log_info(
        self,
        target: str = "",
        message: str = "",
        data: dict | None = None,
        is_console: bool | None = None,
    ):
        now = datetime.datetime.now()
        line = self.format_line(now, target, message, data)

        target_logger = await self.get_logger(target, now)
        await target_logger.info(line)
        self.echo(line, is_console)

    async def log_warning(self, target: str = "", message: str = "", data: dict | None = None, is_console: bool | None = None):
        await self.log_info(target, f"WARNING: {message}", data, is_console)

    async def log_error(self, target: str = "", message: str = "", data: dict | None = None, is_console: bool | None = True):
        await self.log_info(target, f"ERROR: {message}", data, is_console)

    # ────────────── Синхронное (до старта event loop) ──────────────
    def log_info_sync(self, target: str = "", message: str = "", data: dict | None = None, is_console: bool | None = None):
        now = datetime.datetime.now()
        log_path = self.build_log_path(now)
        line = self.format_line(now, target, message, data)

        logger = logging.getLogger(f"shop_sync_{target}")
        logger.setLevel(logging.INFO)
        logger.propagate = False

        # файл меняется каждый день и при смене LOG_DIR
        paths = {getattr(h, "baseFilename", None) for h in logger.handlers}
        if os.path.abspath(log_path) not in paths:
            for h in list(logger.handlers):
                logger.removeHandler(h)
                h.close()
            handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
            handler.setFormatter(logging.Formatter("%(message)s"))
            logger.addHandler(handler)

        logger.info(line)
        self.echo(line, is_console)

    def safe_serialize(self, obj):
        """
        Приводит данные к виду, пригодному для строки лога:
        - dict, list, tuple рекурсивно
        - Pydantic модели через model_dump
        - datetime в ISO
        - прочее → <ИмяТипа>
        """
        if obj is None or isinstance(obj, (str, int, float, bool)):
            return obj
        if isinstance(obj, datetime.datetime):
            return obj.isoformat()
        if isinstance(obj, dict):
            return {k: self.safe_serialize(v) for k, v in obj.items()}
        if isinstance(obj, (list, tuple, set)):
            return [self.safe_serialize(v) for v in obj]
        if hasattr(obj, "model_dump"):  # Pydantic
            return self.safe_serialize(obj.model_dump())
        return f"<{type(obj).__name__}>"

    async def shutdown(self):
        for h in list(self.handlers.values()):
            await h["logger"].shutdown()
        self.handlers.clear()
