"""Shared CLI utilities."""

import click

from ..utils.text import strip_xml_illegal_chars


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def prompt_text(text: str, suffix: str = ": ") -> str:
    """Prompt for a line of free-form text. Empty input is allowed.

    Characters that cannot be stored in the regimen file are dropped.
    """
    value = click.prompt(text, default="", show_default=False, prompt_suffix=suffix)
    return strip_xml_illegal_chars(value)


def wait_for_enter() -> None:
    """Block until the user presses ENTER. The input is discarded."""
    prompt_text("\nPress ENTER to return to the menu", suffix="")
