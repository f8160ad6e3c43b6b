"""Exceptions raised by workout-xml."""


class WorkoutXMLError(Exception):
    """Base class for workout-xml errors."""

    pass


class RegimenFormatError(WorkoutXMLError):
    """Raised when a regimen document does not have the expected shape."""

    pass
