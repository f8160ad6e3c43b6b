"""Repository for reading and writing the regimen file."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ..exceptions import RegimenFormatError
from ..models.exercise import Regimen
from .codec import regimen_from_xml, regimen_to_xml
from .engine import get_regimen_path

logger = logging.getLogger(__name__)


class LoadStatus(str, Enum):
    """Outcome of loading the regimen file."""

    LOADED = "loaded"
    MISSING = "missing"
    INVALID = "invalid"


@dataclass
class LoadResult:
    """A loaded regimen and how it was obtained.

    MISSING and INVALID both carry an empty regimen; neither is an error.
    """

    status: LoadStatus
    regimen: Regimen = field(default_factory=Regimen)

    @property
    def loaded(self) -> bool:
        return self.status == LoadStatus.LOADED


class RegimenRepository:
    """Repository for the persisted regimen."""

    def __init__(self, path: Path | None = None):
        self.path = path or get_regimen_path()

    def load(self) -> LoadResult:
        """Read the regimen file.

        Returns:
            LoadResult with the parsed regimen, or an empty regimen if the
            file does not exist, cannot be read, or is not a regimen document
        """
        try:
            data = self.path.read_bytes()
        except FileNotFoundError:
            logger.debug(f"No regimen file at {self.path}, starting empty")
            return LoadResult(LoadStatus.MISSING)
        except OSError as e:
            logger.info(f"Could not read {self.path}, starting empty: {e}")
            return LoadResult(LoadStatus.INVALID)

        try:
            regimen = regimen_from_xml(data)
        except RegimenFormatError as e:
            logger.info(f"Ignoring invalid regimen file {self.path}: {e}")
            return LoadResult(LoadStatus.INVALID)

        logger.debug(f"Loaded {len(regimen)} exercises from {self.path}")
        return LoadResult(LoadStatus.LOADED, regimen)

    def save(self, regimen: Regimen) -> bool:
        """Write the whole regimen to the file, replacing its contents.

        The existing file is left untouched if the regimen cannot be
        serialized.

        Returns:
            True if the file was written, False if writing failed
        """
        try:
            data = regimen_to_xml(regimen)
        except RegimenFormatError as e:
            logger.error(f"Not saving regimen to {self.path}: {e}")
            return False

        try:
            self.path.write_bytes(data)
        except OSError as e:
            logger.error(f"Failed to save regimen to {self.path}: {e}")
            return False

        logger.debug(f"Saved {len(regimen)} exercises to {self.path}")
        return True
