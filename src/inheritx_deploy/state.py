"""Local deployment state file for inheritx-deploy."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Mapping, Union

from dotenv import dotenv_values

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def load_state(state_path: Union[Path, str]) -> Dict[str, str]:
    """
    Load previously persisted values or return empty dict.

    Args:
        state_path: Path to the KEY=VALUE state file

    Returns:
        Dictionary mapping keys to values, in file order.
        Empty dict if file doesn't exist.

    Raises:
        ConfigurationError: If the file exists but cannot be read
    """
    path = Path(state_path)
    if not path.exists():
        return {}

    try:
        values = dotenv_values(path, interpolate=False)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Could not read state file {path}: {e}") from e
    # Bare keys without "=" come back as None
    return {key: value for key, value in values.items() if value is not None}


def _read_lines(path: Path) -> List[str]:
    with open(path, encoding="utf-8") as f:
        return f.read().splitlines()


def upsert_state(state_path: Union[Path, str], values: Mapping[str, str]) -> None:
    """
    Insert or replace keys in the state file.

    For each key, every existing ``KEY=`` line is removed and a single
    ``KEY=VALUE`` line is appended. Other lines are kept as they are.

    Args:
        state_path: Path to the KEY=VALUE state file (created if missing)
        values: Keys and values to write, in the order they should be appended

    The file is replaced atomically.
    """
    path = Path(state_path)
    if not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()

    lines = _read_lines(path)
    for key, value in values.items():
        prefix = f"{key}="
        lines = [line for line in lines if not line.startswith(prefix)]
        lines.append(f"{key}={value}")

    tmp = tempfile.NamedTemporaryFile(
        "w", encoding="utf-8", prefix=f"{path.name}.", suffix=".tmp", dir=path.parent, delete=False
    )
    try:
        with tmp as f:
            f.write("\n".join(lines) + "\n")
        os.replace(tmp.name, path)
    except BaseException:
        os.unlink(tmp.name)
        raise

    logger.debug("Wrote %d key(s) to %s", len(values), path)
