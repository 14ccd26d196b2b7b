from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


class PolicyError(ValueError):
    pass


DEFAULT_ALLOWED_COMMANDS = ("echo", "date", "whoami", "uptime", "ls", "cat", "hostname")

DEFAULT_FORBIDDEN_PATTERNS = (
    "|",
    "&&",
    ";",
    "$(",
    "`",
    ">",
    "<",
    "rm ",
    "sudo",
    "shutdown",
    "reboot",
)


# Whitespace as JavaScript's trim() and \s see it (ECMAScript WhiteSpace
# and LineTerminator). Unlike str.isspace() it excludes \x1c-\x1f and \x85 and
# includes the byte-order mark.
COMMAND_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    + "".join(chr(code) for code in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


@dataclass(frozen=True)
class ValidationPolicy:
    """Allow-list of base commands plus an ordered deny-list of substrings.

    The first forbidden pattern that matches is the one reported, so the order of
    ``forbidden_patterns`` is kept as given. ``fold_case`` lower-cases the base
    command before the allow-list lookup; it is off by default to match the
    original form's behaviour.

    Any iterable of strings is accepted for either rule set; ``__post_init__``
    stores them as a frozenset and a tuple and rejects entries that could never
    match (or would match everything).
    """

    allowed_commands: frozenset[str] = field(default=DEFAULT_ALLOWED_COMMANDS)
    forbidden_patterns: tuple[str, ...] = DEFAULT_FORBIDDEN_PATTERNS
    fold_case: bool = False
    _display_order: tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        raw_allowed = self.allowed_commands
        if isinstance(raw_allowed, str):
            raise PolicyError("Allow-list must be a collection of command names, not a string.")
        if isinstance(raw_allowed, (set, frozenset)):
            allowed = tuple(sorted(raw_allowed))
        else:
            allowed = _dedupe(raw_allowed)
        if not allowed:
            raise PolicyError("Allow-list must contain at least one command.")
        for name in allowed:
            if not isinstance(name, str) or not name or "/" in name or any(ch in COMMAND_WHITESPACE for ch in name):
                raise PolicyError(f"Invalid allow-list entry: {name!r}")

        if isinstance(self.forbidden_patterns, str):
            raise PolicyError("Forbidden patterns must be a collection of strings, not a string.")
        patterns = tuple(self.forbidden_patterns)
        for pattern in patterns:
            if not isinstance(pattern, str) or not pattern:
                raise PolicyError("Forbidden patterns must be non-empty strings.")

        object.__setattr__(self, "allowed_commands", frozenset(allowed))
        object.__setattr__(self, "forbidden_patterns", patterns)
        object.__setattr__(self, "fold_case", bool(self.fold_case))
        object.__setattr__(self, "_display_order", allowed)

    @classmethod
    def build(
        cls,
        allowed_commands: Iterable[str] = DEFAULT_ALLOWED_COMMANDS,
        forbidden_patterns: Iterable[str] = DEFAULT_FORBIDDEN_PATTERNS,
        fold_case: bool = False,
    ) -> ValidationPolicy:
        return cls(
            allowed_commands=allowed_commands,
            forbidden_patterns=forbidden_patterns,
            fold_case=fold_case,
        )

    def allowed_display(self) -> str:
        return ", ".join(self._display_order)


def _dedupe(values: Iterable[str]) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for value in values:
        seen.setdefault(value, None)
    return tuple(seen)


DEFAULT_POLICY = ValidationPolicy.build()
