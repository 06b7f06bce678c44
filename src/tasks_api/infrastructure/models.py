from typing import Any

from pydantic import BaseModel, Field, TypeAdapter, ValidationInfo, field_validator, model_validator


class Task(BaseModel):
    id: str = ""
    description: str = ""
    note: str = ""
    applications: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _fold_field_names(cls, data: Any) -> Any:
        # "ID", "Note", ... land on their fields; a later duplicate key wins.
        if not isinstance(data, dict):
            return data
        by_folded = {name.casefold(): name for name in cls.model_fields}
        folded = {}
        for key, value in data.items():
            if isinstance(key, str):
                key = by_folded.get(key.casefold(), key)
            folded[key] = value
        return folded

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


_task_or_null = TypeAdapter(Task | None)


def decode_task(body: bytes) -> Task:
    """
    Decode a raw request body into a Task.

    The body must be UTF-8 JSON; a bare ``null`` decodes to an empty Task.
    Raises ``UnicodeDecodeError`` or pydantic's ``ValidationError``.
    """
    task = _task_or_null.validate_json(body.decode("utf-8"))
    return Task() if task is None else task


SEED_TASKS = (
    Task(
        id="1",
        description="Сделать финальное задание темы REST API",
        note="Если сегодня сделаю, то завтра будет свободный день. Ура!",
        applications=["VS Code", "Terminal", "git"],
    ),
    Task(
        id="2",
        description="Протестировать финальное задание с помощью Postmen",
        note=(
            "Лучше это делать в процессе разработки, каждый раз, "
            "когда запускаешь сервер и проверяешь хендлер"
        ),
        applications=["VS Code", "Terminal", "git", "Postman"],
    ),
)
