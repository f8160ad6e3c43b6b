"""CLI entry point for workout-xml."""

import logging

import click

from . import __version__
from .commands import MenuLoop
from .db import RegimenRepository


@click.command()
@click.version_option(version=__version__, prog_name="workout-xml")
def main():
    """workout-xml: Keep your workout regimen in an XML file.

    Starts an interactive menu for adding exercises, printing the regimen
    and searching it. The regimen is stored in Workout.xml in the current
    directory and is created on the first addition.
    """
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    repository = RegimenRepository()
    result = repository.load()
    MenuLoop(repository, result.regimen).run()


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
