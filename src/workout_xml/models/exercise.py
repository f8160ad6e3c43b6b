"""Exercise and regimen models."""

from dataclasses import dataclass, field, fields as dataclass_fields
from typing import Iterator


@dataclass(frozen=True)
class ExerciseField:
    """A fixed exercise attribute and how it is stored and shown."""

    key: str  # Python attribute name
    tag: str  # XML element name
    label: str  # Human-readable display label


EXERCISE_FIELDS: tuple[ExerciseField, ...] = (
    ExerciseField("name", "name", "Name"),
    ExerciseField("body_part", "bodyPart", "Muscle group(s)"),
    ExerciseField("sets", "sets", "# of sets"),
    ExerciseField("reps", "reps", "# of reps"),
    ExerciseField("weight", "weight", "Weight (lbs)"),
)


@dataclass
class Exercise:
    """A single workout entry.

    All values are kept exactly as the user typed them. Sets, reps and
    weight are not parsed, so entries like "N/A" or "8-12" are valid.
    """

    name: str = ""
    body_part: str = ""
    sets: str = ""
    reps: str = ""
    weight: str = ""

    def fields(self) -> Iterator[tuple[ExerciseField, str]]:
        """Yield (field, value) pairs in display order."""
        for exercise_field in EXERCISE_FIELDS:
            yield exercise_field, getattr(self, exercise_field.key)

    def values(self) -> list[str]:
        """Get the field values in display order."""
        return [value for _, value in self.fields()]

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        """Create from dictionary, defaulting absent fields to empty."""
        known = {f.name for f in dataclass_fields(cls)}
        return cls(**{k: str(v) for k, v in data.items() if k in known and v is not None})


@dataclass
class Regimen:
    """Ordered collection of exercises. Order is display order."""

    exercises: list[Exercise] = field(default_factory=list)

    def append(self, exercise: Exercise) -> None:
        """Add an exercise to the end of the regimen."""
        self.exercises.append(exercise)

    def is_empty(self) -> bool:
        return not self.exercises

    def __len__(self) -> int:
        return len(self.exercises)

    def __iter__(self) -> Iterator[Exercise]:
        return iter(self.exercises)
