from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator

from command_gate.policy import DEFAULT_POLICY, ValidationPolicy
from command_gate.validator import CommandRejected, check_command

_REQUIRED_MESSAGES = {
    "name": "Please input the task name!",
    "owner": "Please input the owner's name!",
    "command": "Please input the command!",
}


class TaskExecution(BaseModel):
    model_config = ConfigDict(frozen=True)

    start_time: str
    end_time: str
    output: str


class NewTask(BaseModel):
    """Payload submitted by the task form; the command is gated by the validator."""

    name: str
    owner: str
    command: str
    status: Optional[str] = None

    @field_validator("name", "owner")
    @classmethod
    def _required(cls, value: str, info: ValidationInfo) -> str:
        if not value:
            raise ValueError(_REQUIRED_MESSAGES[info.field_name])
        return value

    @field_validator("command")
    @classmethod
    def _allowed_command(cls, value: str, info: ValidationInfo) -> str:
        if not value:
            raise ValueError(_REQUIRED_MESSAGES["command"])
        policy = DEFAULT_POLICY
        if isinstance(info.context, dict):
            policy = info.context.get("policy", DEFAULT_POLICY)
        try:
            return check_command(value, policy)
        except CommandRejected as exc:
            raise ValueError(exc.outcome.detail) from exc


class Task(NewTask):
    id: str
    task_executions: list[TaskExecution] = []


@dataclass
class FormResult:
    task: NewTask | None
    errors: dict[str, str] = field(default_factory=dict)
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.task is not None


def command_help(policy: ValidationPolicy = DEFAULT_POLICY) -> str:
    return f"Allowed: {policy.allowed_display()}"


def _field_errors(exc: ValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for error in exc.errors():
        loc = str(error["loc"][0]) if error["loc"] else "__root__"
        if error["type"] in {"missing", "string_type"} and loc in _REQUIRED_MESSAGES:
            message = _REQUIRED_MESSAGES[loc]
        elif error["type"] == "value_error":
            message = str(error["ctx"]["error"])
        else:
            message = error["msg"]
        errors.setdefault(loc, message)
    return errors


def submit_task_form(
    values: dict[str, Any],
    policy: ValidationPolicy = DEFAULT_POLICY,
    initial: Task | None = None,
) -> FormResult:
    payload: dict[str, Any] = initial.model_dump() if initial is not None else {}
    payload.update(values)
    model = Task if initial is not None else NewTask
    try:
        task = model.model_validate(payload, context={"policy": policy})
    except ValidationError as exc:
        return FormResult(task=None, errors=_field_errors(exc), message="Please correct the form errors.")
    return FormResult(task=task, message="Task updated!" if initial is not None else "Task created!")
