"""Path management utilities for inheritx-deploy."""

import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

from .constants import CONTRACTS_DIR_NAME, STATE_FILE_NAME
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def get_default_state_path() -> Path:
    """
    Get default state file path (invocation directory).

    Returns:
        Path to ./.env
    """
    return Path.cwd() / STATE_FILE_NAME


def find_contracts_dir(start: Optional[Union[Path, str]] = None) -> Path:
    """
    Locate the contracts workspace.

    Checks ``<start>/contracts`` first, then ``<start>/../contracts``, so the
    tool works from the repository root and from a sibling directory such as
    ``scripts/``.

    Args:
        start: Directory to search from (defaults to the current directory)

    Returns:
        Absolute path to the contracts directory

    Raises:
        ConfigurationError: If neither candidate exists
    """
    base = Path.cwd() if start is None else Path(start).absolute()

    for candidate in (base / CONTRACTS_DIR_NAME, base.parent / CONTRACTS_DIR_NAME):
        if candidate.is_dir():
            return candidate.resolve()

    raise ConfigurationError(
        f"Could not find contracts directory: looked for ./{CONTRACTS_DIR_NAME} "
        f"and ../{CONTRACTS_DIR_NAME} relative to {base}"
    )


@contextmanager
def working_directory(path: Union[Path, str]) -> Iterator[Path]:
    """
    Change into a directory for the duration of a block.

    The previous working directory is restored on every exit path.
    """
    previous = Path.cwd()
    target = Path(path)
    os.chdir(target)
    logger.debug("Entered %s", target)
    try:
        yield target
    finally:
        os.chdir(previous)
        logger.debug("Returned to %s", previous)
