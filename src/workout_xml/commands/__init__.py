"""CLI commands for workout-xml."""

from .menu import MenuLoop, MenuState, parse_menu_choice

__all__ = [
    "MenuLoop",
    "MenuState",
    "parse_menu_choice",
]
