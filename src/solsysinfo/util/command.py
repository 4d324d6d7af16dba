import logging
import subprocess
from typing import List

logger = logging.getLogger(__name__)


def run_native(command: List[str]) -> List[str]:
    """
    Runs ``command`` and returns its standard output, split into lines.

    A command that is not installed, cannot be started, or exits with a
    non-zero status is treated as having printed nothing.
    """
    try:
        # vendor strings are not guaranteed to be valid in the locale encoding
        result = subprocess.run(command, capture_output=True, text=True, errors="replace")
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("Could not run %s: %s", " ".join(command), e)
        return []

    if result.returncode != 0:
        logger.debug("%s exited with status %s", " ".join(command), result.returncode)
        return []

    return result.stdout.splitlines()


def get_first_answer(command: List[str]) -> str:
    lines = run_native(command)
    return lines[0] if lines else ""
