"""Text rendering for exercises and search results."""

from .models.exercise import Exercise, Regimen

EMPTY_REGIMEN_MESSAGE = "The regimen is currently empty."
REGIMEN_HEADER = "Here is the current regimen:"
NO_MATCHES_MESSAGE = "No matches found."


def format_exercise(exercise: Exercise) -> str:
    """Render each field as '<Label>: <value>', one per line."""
    return "\n".join(f"{f.label}: {value}" for f, value in exercise.fields())


def format_regimen(regimen: Regimen) -> str:
    """Render the whole regimen, or a notice if it has no exercises."""
    if regimen.is_empty():
        return EMPTY_REGIMEN_MESSAGE

    blocks = [REGIMEN_HEADER]
    blocks.extend(format_exercise(ex) for ex in regimen)
    return "\n\n".join(blocks)


def format_search_results(term: str, matches: list[Exercise]) -> str:
    """Render a result count line followed by each matching exercise."""
    count = len(matches)
    if count == 0:
        return NO_MATCHES_MESSAGE

    noun = "result" if count == 1 else "results"
    blocks = [f'Found {count} {noun} for "{term}"']
    blocks.extend(format_exercise(ex) for ex in matches)
    return "\n\n".join(blocks)
