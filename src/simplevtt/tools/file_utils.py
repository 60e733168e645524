from pathlib import Path
import logging

from simplevtt.constants import SUBTITLE_SUFFIXES

logger = logging.getLogger(__name__)

class formats:
    @staticmethod
    def _is_of_type(file: Path | None, suffixes: frozenset[str]) -> bool:
        """
        Check if a file's suffix is in a given set.
        """
        return file is not None and file.suffix.lower() in suffixes

    @staticmethod
    def is_sub(file: Path | None) -> bool:
        """Checks if the file is an .ass/.ssa subtitle file."""
        return formats._is_of_type(file, SUBTITLE_SUFFIXES)


def get_project_dir(marker: str = "pyproject.toml") -> Path:
    """Find the project root by looking for a marker file."""
    current_path = Path(__file__).parent
    for parent in [current_path] + list(current_path.parents):
        if (parent / marker).exists():
            return parent
    raise FileNotFoundError(f"Could not find project root dir with marker '{marker}'.")
