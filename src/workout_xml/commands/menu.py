"""Interactive menu for managing the regimen."""

from enum import Enum

import click

from ..db.repositories import RegimenRepository
from ..formatting import format_regimen, format_search_results
from ..models.exercise import Exercise, Regimen
from ..utils.search import normalize_search_term, search_regimen
from .base import echo_error, echo_success, prompt_text, wait_for_enter

WELCOME_TEXT = (
    "Welcome to your Workout Regimen!\n\n"
    "Using this workout program, you can add to, search from and print out your "
    "personal regimen. Enter the number next to an option and press ENTER to "
    "access such method."
)

MENU_OPTIONS = (
    "1 Add an exercise\n"
    "2 Print regimen\n"
    "3 Search exercises\n"
    "4 Exit"
)

ADD_INTRO = (
    "This method adds an exercise completely customized by you to your regimen. "
    "Please enter in the relevant information regarding the exercise as prompted."
)

SEARCH_INTRO = (
    "This method searches your entire regimen for any mention of the search term "
    "you provide. All potential matches are then printed on screen."
)

# Prompt for each exercise attribute, in field order
ADD_PROMPTS = (
    ("name", "Name of exercise"),
    ("body_part", "Muscle group(s) worked"),
    ("sets", "Number of sets"),
    ("reps", "Number of reps"),
    ("weight", "Weight in lbs (N/A if body weight exercise)"),
)


class MenuState(str, Enum):
    """States of the menu loop."""

    MENU = "menu"
    ADD = "add"
    LIST = "list"
    SEARCH = "search"
    EXIT = "exit"
    INVALID = "invalid"


MENU_CHOICES = {
    1: MenuState.ADD,
    2: MenuState.LIST,
    3: MenuState.SEARCH,
    4: MenuState.EXIT,
}


def parse_menu_choice(raw: str) -> MenuState:
    """Map raw menu input to the state it selects.

    Input is read as a whole number, so "01" and "+1" select option 1.
    Non-numeric input and numbers without an option are both INVALID.
    """
    try:
        choice = int(raw.strip())
    except ValueError:
        return MenuState.INVALID

    return MENU_CHOICES.get(choice, MenuState.INVALID)


class MenuLoop:
    """Prompt/dispatch loop over an in-memory regimen.

    The regimen is saved through the repository after every addition.
    """

    def __init__(self, repository: RegimenRepository, regimen: Regimen | None = None):
        self.repository = repository
        self.regimen = regimen if regimen is not None else Regimen()
        self._actions = {
            MenuState.ADD: self.do_add,
            MenuState.LIST: self.do_list,
            MenuState.SEARCH: self.do_search,
            MenuState.INVALID: self.do_invalid,
        }

    def run(self) -> None:
        """Run the menu until the user exits or input ends."""
        state = MenuState.MENU
        try:
            while state != MenuState.EXIT:
                state = self.step(state)
        except click.Abort:
            # End of input or Ctrl-C at a prompt
            click.echo()
            return

        click.clear()
        click.echo("Goodbye!")

    def step(self, state: MenuState) -> MenuState:
        """Handle one state and return the next one."""
        if state == MenuState.MENU:
            return self.prompt_choice()

        click.clear()
        self._actions[state]()
        wait_for_enter()
        return MenuState.MENU

    def prompt_choice(self) -> MenuState:
        """Show the menu and read the user's choice."""
        click.clear()
        click.echo(click.style(WELCOME_TEXT, fg="green", bold=True))
        click.echo()
        click.echo(MENU_OPTIONS)
        click.echo()
        return parse_menu_choice(prompt_text("Enter an option"))

    def collect_exercise(self) -> Exercise:
        """Prompt for each exercise attribute in order."""
        values = {key: prompt_text(text) for key, text in ADD_PROMPTS}
        return Exercise(**values)

    def add_exercise(self, exercise: Exercise) -> bool:
        """Append an exercise and save the regimen.

        Returns:
            True if the regimen was saved, False if it is only held in memory
        """
        self.regimen.append(exercise)
        return self.repository.save(self.regimen)

    def do_add(self) -> None:
        click.echo(ADD_INTRO)
        click.echo()
        exercise = self.collect_exercise()

        click.echo()
        if self.add_exercise(exercise):
            echo_success("Successfully added exercise to regimen!")
        else:
            echo_error(
                f"Could not write to {self.repository.path}. "
                "The exercise is kept for this session only."
            )

    def do_list(self) -> None:
        click.echo(format_regimen(self.regimen))

    def do_search(self) -> None:
        click.echo(SEARCH_INTRO)
        click.echo()
        term = normalize_search_term(prompt_text("Please enter search term"))

        click.echo()
        matches = search_regimen(self.regimen, term)
        click.echo(format_search_results(term, matches))

    def do_invalid(self) -> None:
        echo_error("Invalid command.")
