# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Session credential handling.

The puzzle site identifies a user by a session cookie. We read it from an
environment variable, which may itself come from a `.env` file in the working
directory. The value is opaque: it is never parsed, only forwarded.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from aocbench.puzzle.exceptions import MissingSessionError

SESSION_ENV_VAR = "ADVENT_OF_CODE_SESSION"


def load_env_file(path: Optional[Path] = None) -> bool:
    """
    Load variables from a `.env` file without overriding ones already set.

    Args:
        path: Explicit `.env` path. None searches from the working directory.

    Returns:
        True if a file was found and loaded. A missing file is not an error.
    """
    if path is not None:
        if not path.is_file():
            return False
        return load_dotenv(dotenv_path=path, override=False)
    found = find_dotenv(usecwd=True)
    if not found:
        return False
    return load_dotenv(dotenv_path=found, override=False)


def get_session(env_var: str = SESSION_ENV_VAR) -> str:
    """
    Return the session credential.

    Raises:
        MissingSessionError: The variable is unset or empty.
    """
    session = os.environ.get(env_var, "").strip()
    if not session:
        raise MissingSessionError(f"{env_var} env var required to get puzzle input")
    return session
