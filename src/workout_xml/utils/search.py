"""Substring search over a regimen."""

from ..models.exercise import Exercise, Regimen


def normalize_search_term(term: str) -> str:
    """Normalize a search term for matching.

    Strips surrounding whitespace and lowercases.
    """
    return term.strip().lower()


def exercise_matches(exercise: Exercise, term: str) -> bool:
    """Check whether any field value of an exercise contains the term.

    Field values are lowercased before comparison; the term is expected to
    be normalized already.
    """
    return any(term in value.lower() for value in exercise.values())


def search_regimen(regimen: Regimen, term: str) -> list[Exercise]:
    """Find all exercises with a field value containing the term.

    Args:
        regimen: The regimen to search
        term: Normalized search term (see normalize_search_term)

    Returns:
        Matching exercises in regimen order, each at most once
    """
    return [exercise for exercise in regimen if exercise_matches(exercise, term)]
