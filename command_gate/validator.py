from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

from command_gate.policy import COMMAND_WHITESPACE, DEFAULT_POLICY, ValidationPolicy

EMPTY_MESSAGE = "Command cannot be empty."

_WHITESPACE_RUN = re.compile("[" + re.escape(COMMAND_WHITESPACE) + "]+")


class ErrorKind(str, Enum):
    EMPTY = "empty"
    FORBIDDEN_OPERATOR = "forbidden_operator"
    NOT_WHITELISTED = "not_whitelisted"


@dataclass(frozen=True)
class Accepted:
    ok = True


@dataclass(frozen=True)
class Rejected:
    reason: ErrorKind
    detail: str

    ok = False


ValidationOutcome = Union[Accepted, Rejected]


class CommandRejected(ValueError):
    def __init__(self, outcome: Rejected) -> None:
        super().__init__(outcome.detail)
        self.outcome = outcome


def trim_command(command: str) -> str:
    return command.strip(COMMAND_WHITESPACE)


def base_command(command: str) -> str:
    """First whitespace-delimited token of ``command`` with any path prefix dropped."""
    first_token = _WHITESPACE_RUN.split(trim_command(command), maxsplit=1)[0]
    if "/" in first_token:
        first_token = first_token[first_token.rindex("/") + 1 :]
    return first_token


def validate(command: str | None, policy: ValidationPolicy = DEFAULT_POLICY) -> ValidationOutcome:
    if command is None or not trim_command(command):
        return Rejected(ErrorKind.EMPTY, EMPTY_MESSAGE)

    # Forbidden patterns are checked against the whole string before the allow-list.
    lower = command.lower()
    for pattern in policy.forbidden_patterns:
        if pattern.lower() in lower:
            return Rejected(ErrorKind.FORBIDDEN_OPERATOR, f"Command contains forbidden operator: {pattern}")

    token = base_command(command)
    lookup = token.lower() if policy.fold_case else token
    if lookup not in policy.allowed_commands:
        return Rejected(
            ErrorKind.NOT_WHITELISTED,
            f"Command '{token}' is not in the whitelist. Allowed: {policy.allowed_display()}",
        )
    return Accepted()


def check_command(command: str | None, policy: ValidationPolicy = DEFAULT_POLICY) -> str:
    outcome = validate(command, policy)
    if isinstance(outcome, Rejected):
        raise CommandRejected(outcome)
    return command
