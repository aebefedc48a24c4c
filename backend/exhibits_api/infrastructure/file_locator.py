"""File Locator — resolve a data file name to a path that exists on disk.

Invariants:
    - Candidates tried in order: configured data dir, working directory
      (relative name), directory of the launched program, fresh os.getcwd() join
    - First existing candidate wins; nothing is cached between calls
    - Not found raises DataFileNotFoundError carrying the original name unmodified

Design Decisions:
    - Relative name and fresh getcwd() kept as separate candidates: the working
      directory may change between process start and the call
    - Program directory comes from sys.argv[0], so data shipped next to the
      entry script is found regardless of where the process was started
"""

import logging
import os
import sys

from exhibits_api.core.errors import DataFileNotFoundError

logger = logging.getLogger(__name__)


def _program_dir() -> str | None:
    argv0 = sys.argv[0] if sys.argv else ""
    if not argv0:
        return None
    return os.path.dirname(os.path.abspath(argv0))


def candidate_paths(filename: str, data_dir: str | None = None) -> list[str]:
    """Ordered list of locations where filename may live."""
    candidates = []
    if data_dir:
        candidates.append(os.path.join(data_dir, filename))
    candidates.append(filename)
    program_dir = _program_dir()
    if program_dir:
        candidates.append(os.path.join(program_dir, filename))
    try:
        candidates.append(os.path.join(os.getcwd(), filename))
    except OSError:
        # Working directory was removed out from under the process
        pass
    return candidates


def find_file(filename: str, data_dir: str | None = None) -> str:
    """Return the first existing candidate path for filename."""
    searched = candidate_paths(filename, data_dir)
    for path in searched:
        if os.path.exists(path):
            return path
    logger.debug(
        f"{filename} not found in {len(searched)} locations",
        extra={"data_file": filename},
    )
    raise DataFileNotFoundError(filename, searched)
