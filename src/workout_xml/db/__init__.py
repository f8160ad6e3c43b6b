"""Storage layer for workout-xml."""

from .codec import regimen_from_xml, regimen_to_xml
from .engine import REGIMEN_FILENAME, get_regimen_path
from .repositories import LoadResult, LoadStatus, RegimenRepository

__all__ = [
    "get_regimen_path",
    "LoadResult",
    "LoadStatus",
    "REGIMEN_FILENAME",
    "regimen_from_xml",
    "regimen_to_xml",
    "RegimenRepository",
]
