from __future__ import annotations

import argparse

from command_gate.config import ConfigError, load_config
from command_gate.ui import (
    create_console,
    show_error,
    show_goodbye,
    show_outcome,
    show_policy,
    show_startup,
)
from command_gate.validator import validate


def main(argv: list[str] | None = None, console=None) -> int:
    parser = argparse.ArgumentParser(prog="command-gate", description="Check task commands against the command policy")
    parser.add_argument("--command", help="Validate a single command and exit")
    parser.add_argument("--policy", action="store_true", help="Print the active policy and exit")
    args = parser.parse_args(argv)

    if console is None:
        console = create_console()
    try:
        policy = load_config().policy()
    except ConfigError as exc:
        show_error(console, str(exc))
        return 2

    if args.policy:
        show_policy(console, policy)
        return 0

    if args.command is not None:
        outcome = validate(args.command, policy)
        show_outcome(console, args.command, outcome)
        return 0 if outcome.ok else 1

    show_startup(console)
    while True:
        try:
            command = console.input("[prompt]$ [/prompt]")
        except (EOFError, KeyboardInterrupt):
            show_goodbye(console)
            return 0
        if command.strip() == "/exit":
            show_goodbye(console)
            return 0
        if command.strip() == "/policy":
            show_policy(console, policy)
            continue
        show_outcome(console, command, validate(command, policy))


if __name__ == "__main__":
    raise SystemExit(main())
