import logging
import sys

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from tasks_api.errors import TasksApiError
from tasks_api.infrastructure.store import TaskStore
from tasks_api.interfaces.http import router as task_router
from tasks_api.logging_setup import setup_logging
from tasks_api.settings import Settings, get_settings

logger = logging.getLogger(__name__)


async def tasks_api_error_handler(request: Request, exc: TasksApiError) -> PlainTextResponse:
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, int(exc.status_code), exc.message)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title="Tasks API", version="0.1.0")
    app.state.settings = settings
    app.state.store = TaskStore() if settings.seed_tasks else TaskStore(())

    app.add_exception_handler(TasksApiError, tasks_api_error_handler)
    app.include_router(task_router, prefix="/tasks")
    return app


def run() -> None:
    settings = get_settings()
    # Logging first, so the store's startup line is not lost.
    setup_logging(settings.log_level.upper())
    app = create_app(settings)
    try:
        uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    except (OSError, RuntimeError) as exc:
        logger.error("Ошибка при запуске сервера: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    run()
