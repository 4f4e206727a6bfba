# app/middleware/db_middleware.py

from starlette.types import ASGIApp, Receive, Scope, Send

class DBSessionMiddleware:
    """Открывает AsyncSession на время запроса и кладёт её в request.state.db."""

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        # фабрика сессий создаётся в lifespan (app.utils.database.init_db)
        sessionmaker = scope["app"].state.sessionmaker

        state = scope.setdefault("state", {})
        state["db"] = sessionmaker()
        try:
            await self.app(scope, receive, send)
        finally:
            # закрываем сессию только после завершения запроса
            await state["db"].close()
