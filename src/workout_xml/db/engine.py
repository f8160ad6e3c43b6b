"""Storage location for the regimen file."""

from pathlib import Path

# File name of the persisted regimen, relative to the data directory
REGIMEN_FILENAME = "Workout.xml"


def get_regimen_path(data_dir: Path | None = None) -> Path:
    """Get the regimen file path.

    Defaults to the current working directory.
    """
    if data_dir is None:
        data_dir = Path.cwd()
    return Path(data_dir) / REGIMEN_FILENAME
