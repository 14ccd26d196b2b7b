from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from command_gate.policy import ValidationPolicy
from command_gate.validator import Rejected, ValidationOutcome

gate_theme = Theme(
    {
        "primary": "bold green",
        "error": "bold red",
        "dim": "dim green",
        "panel.border": "green",
        "reject.border": "red",
        "prompt": "bold green",
    }
)


def create_console(**kwargs) -> Console:
    return Console(theme=gate_theme, **kwargs)


def show_startup(console: Console) -> None:
    console.print(Panel("[primary]Command gate. Type a command to check it.[/primary]", style="panel.border"))
    console.print("[primary]Commands[/primary]: /policy, /exit")


def show_policy(console: Console, policy: ValidationPolicy) -> None:
    table = Table(title="Command policy", border_style="green")
    table.add_column("Rule", style="primary")
    table.add_column("Value")
    table.add_row("allowed", Text(policy.allowed_display()))
    table.add_row("forbidden", Text(" ".join(repr(pattern) for pattern in policy.forbidden_patterns)))
    table.add_row("fold case", "yes" if policy.fold_case else "no")
    console.print(table)


def show_outcome(console: Console, command: str, outcome: ValidationOutcome) -> None:
    if isinstance(outcome, Rejected):
        body = Text.assemble(("rejected", "error"), f" [{outcome.reason.value}] ", outcome.detail)
        console.print(Panel(body, style="reject.border"))
        return
    console.print(Text.assemble(("accepted", "primary"), " ", command))


def show_error(console: Console, message: str) -> None:
    console.print(Panel(Text.assemble(("error", "error"), " ", message), style="reject.border"))


def show_goodbye(console: Console) -> None:
    console.print("Bye.")
