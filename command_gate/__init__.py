"""Command authorization for task submissions.

Decides whether a raw command string may be saved or queued as a task command,
using an allow-list of base commands and a deny-list of substrings.
"""

from .policy import DEFAULT_POLICY, PolicyError, ValidationPolicy
from .validator import (
    Accepted,
    CommandRejected,
    ErrorKind,
    Rejected,
    ValidationOutcome,
    base_command,
    check_command,
    validate,
)

__all__ = [
    "DEFAULT_POLICY",
    "PolicyError",
    "ValidationPolicy",
    "Accepted",
    "CommandRejected",
    "ErrorKind",
    "Rejected",
    "ValidationOutcome",
    "base_command",
    "check_command",
    "validate",
]
