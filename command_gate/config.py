from __future__ import annotations

import json
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from command_gate.policy import (
    DEFAULT_ALLOWED_COMMANDS,
    DEFAULT_FORBIDDEN_PATTERNS,
    PolicyError,
    ValidationPolicy,
)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class GateConfig:
    allowed_commands: tuple[str, ...]
    forbidden_patterns: tuple[str, ...]
    fold_case: bool

    def policy(self) -> ValidationPolicy:
        try:
            return ValidationPolicy.build(
                allowed_commands=self.allowed_commands,
                forbidden_patterns=self.forbidden_patterns,
                fold_case=self.fold_case,
            )
        except PolicyError as exc:
            raise ConfigError(f"Invalid command policy: {exc}") from exc


def _parse_allowed(raw: str | None) -> tuple[str, ...]:
    if raw is None:
        return DEFAULT_ALLOWED_COMMANDS
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def _parse_forbidden(raw: str | None) -> tuple[str, ...]:
    if raw is None:
        return DEFAULT_FORBIDDEN_PATTERNS
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"COMMAND_GATE_FORBIDDEN must be a JSON array of strings: {exc}") from exc
    if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
        raise ConfigError("COMMAND_GATE_FORBIDDEN must be a JSON array of strings.")
    return tuple(data)


def _parse_bool(name: str, raw: str | None) -> bool:
    value = (raw or "").strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}.")


def load_config() -> GateConfig:
    load_dotenv()
    return GateConfig(
        allowed_commands=_parse_allowed(os.getenv("COMMAND_GATE_ALLOWED")),
        forbidden_patterns=_parse_forbidden(os.getenv("COMMAND_GATE_FORBIDDEN")),
        fold_case=_parse_bool("COMMAND_GATE_FOLD_CASE", os.getenv("COMMAND_GATE_FOLD_CASE")),
    )
