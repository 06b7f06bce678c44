import logging
from http import HTTPStatus

from fastapi import APIRouter, Depends, Request, Response
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError
from starlette.requests import ClientDisconnect

from tasks_api.errors import MalformedTaskError, TaskNotFoundError, TaskSerializationError
from tasks_api.infrastructure.models import Task, decode_task
from tasks_api.infrastructure.store import TaskStore
from tasks_api.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()

JSON_MEDIA_TYPE = "application/json"

_task_map = TypeAdapter(dict[str, Task])


def get_store(request: Request) -> TaskStore:
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def _describe_decode_error(exc: ValueError) -> str:
    if not isinstance(exc, ValidationError):
        return str(exc)
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts) or str(exc)


async def read_task(request: Request) -> Task:
    """
    Read the whole request body and decode it as a Task.

    The Content-Type header is not consulted. Any read or decode failure
    becomes a plain-text 400.
    """
    try:
        body = await request.body()
    except ClientDisconnect as exc:
        raise MalformedTaskError("client disconnected before the body was read") from exc
    try:
        return decode_task(body)
    except ValueError as exc:
        raise MalformedTaskError(_describe_decode_error(exc)) from exc


@router.get("", response_model=dict[str, Task])
async def list_tasks(store: TaskStore = Depends(get_store)):
    try:
        body = _task_map.dump_json(store.get_all())
    except PydanticSerializationError as exc:
        raise TaskSerializationError(str(exc)) from exc
    return Response(content=body, media_type=JSON_MEDIA_TYPE)


@router.post("", status_code=201)
async def create_task(task: Task = Depends(read_task), store: TaskStore = Depends(get_store)):
    # Upsert: an existing record under the same id is replaced whole.
    store.put(task)
    logger.info("Stored task id=%r", task.id)
    return Response(status_code=HTTPStatus.CREATED, media_type=JSON_MEDIA_TYPE)


@router.get("/{task_id}", response_model=Task)
async def get_task(
    task_id: str,
    store: TaskStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
):
    task = store.get(task_id)
    if task is None:
        raise TaskNotFoundError(
            HTTPStatus.BAD_REQUEST if settings.legacy_status_codes else HTTPStatus.NOT_FOUND
        )

    try:
        body = task.model_dump_json()
    except PydanticSerializationError as exc:
        raise TaskSerializationError(
            str(exc),
            HTTPStatus.BAD_REQUEST if settings.legacy_status_codes else None,
        ) from exc
    return Response(content=body, media_type=JSON_MEDIA_TYPE)


@router.delete("/{task_id}")
async def delete_task(task_id: str, task: Task = Depends(read_task), store: TaskStore = Depends(get_store)):
    """
    Delete the task whose id is given in the request body.

    The ``task_id`` path segment is not consulted; unknown ids are
    accepted and answered with 200 like any other delete.
    """
    store.delete(task.id)
    logger.info("Deleted task id=%r path=%r", task.id, task_id)
    return Response(status_code=HTTPStatus.OK, media_type=JSON_MEDIA_TYPE)
