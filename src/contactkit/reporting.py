"""
Human-readable descriptions of contact methods.
"""

from collections.abc import Iterable
from typing import assert_never

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from . import config
from .domain.methods import ContactMethod, ContactProfile, Email, HomePhone, Postal, WorkPhone


def describe(method: ContactMethod) -> str:
    """Describe a single contact method in one line."""
    match method:
        case Email(info=info):
            return f"Email Address is {info.address}"
        case Postal(info=info):
            return f"Postal Address is {info.address.one_line()}"
        case HomePhone(number=number):
            return f"Home Phone is {number}"
        case WorkPhone(number=number):
            return f"Work Phone is {number}"
        case unreachable:
            assert_never(unreachable)


def describe_all(methods: Iterable[ContactMethod]) -> list[str]:
    """Describe each method, one line per method, in input order."""
    return [describe(method) for method in methods]


def print_report(profile: ContactProfile, console: Console | None = None) -> None:
    """Print a profile's contact methods, primary first, as a rich panel."""
    console = console or Console()
    lines = [escape(line) for line in describe_all(profile.methods)]
    lines[0] = f"[bold]{lines[0]}[/bold] (primary)"
    console.print(
        Panel(
            "\n".join(lines),
            title=f"{config.REPORT_TITLE}: {escape(profile.name.full_name)}",
            border_style="cyan",
        )
    )


__all__ = ["describe", "describe_all", "print_report"]
