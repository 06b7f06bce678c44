"""
Exceptions raised by the task handlers.

Each error carries the HTTP status it maps to; the app turns them into
plain-text responses whose body is the error message.
"""

from __future__ import annotations

from http import HTTPStatus

TASK_NOT_FOUND_MESSAGE = "Задание не найдено"


class TasksApiError(Exception):
    status_code: int = HTTPStatus.BAD_REQUEST

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class MalformedTaskError(TasksApiError):
    """Request body could not be read or decoded into a Task."""


class TaskNotFoundError(TasksApiError):
    def __init__(self, status_code: int | None = None) -> None:
        super().__init__(TASK_NOT_FOUND_MESSAGE, status_code)


class TaskSerializationError(TasksApiError):
    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
