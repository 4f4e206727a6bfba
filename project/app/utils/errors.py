# app/utils/errors.py
# Единый формат ошибок API: {"message": ...} или {"message": ..., "error": ...}

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


def format_validation_errors(errors) -> str:
    """Сворачивает ошибки pydantic в строку вида 'body.total: Field required; ...'."""
    parts = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg', '')}" if loc else err.get("msg", ""))
    return "; ".join(parts)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    content = exc.detail if isinstance(exc.detail, dict) else {"message": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


# сообщения для заказов совпадают с ошибками сохранения в app/services/order.py
VALIDATION_MESSAGES = {
    "create_order": "Failed to create order.",
    "update_order_status": "Failed to update order status.",
}


def validation_message(request: Request) -> str:
    route = request.scope.get("route")
    return VALIDATION_MESSAGES.get(getattr(route, "name", None), "Invalid request data.")


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    error = format_validation_errors(exc.errors())
    log = getattr(request.app.state, "log", None)
    if log:
        await log.log_warning("error", "Неверные данные запроса", {
            "method": request.method,
            "path": request.url.path,
            "error": error,
        })
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": validation_message(request), "error": error},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    # детали ошибки только в лог, клиенту общее сообщение
    log = getattr(request.app.state, "log", None)
    if log:
        await log.log_error("error", f"Необработанная ошибка: {type(exc).__name__}: {exc}", {
            "method": request.method,
            "path": request.url.path,
        })
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error."},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
