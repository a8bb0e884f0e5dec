# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Runtime bootstrap for aocbench.

The one-time setup that happens before any command runs:
  1. Validate the environment (Python version)
  2. Load variables from a `.env` file, if there is one
  3. Configure logging from the config and the CLI override

After bootstrap the loggers are at their final level and the session
credential, if it lives in `.env`, is visible in os.environ.
"""

from pathlib import Path
from typing import Optional

from aocbench.config.schema import GlobalConfig
from aocbench.fetch.session import load_env_file
from aocbench.logging.logger import configure_logging, get_logger
from aocbench.runtime.environment import check_minimum_python, get_system_info


def bootstrap(config: GlobalConfig, log_level: Optional[str] = None) -> None:
    """
    Run the full bootstrap sequence.

    Args:
        config: The validated global configuration.
        log_level: CLI override for ``config.log_level``.
    """
    check_minimum_python()
    env_loaded = load_env_file()

    level = log_level or config.log_level
    log_file = Path(config.log_file) if config.log_file is not None else None
    configure_logging(level, log_file=log_file)

    logger = get_logger("aocbench.runtime", log_level=level, log_file=log_file)
    system_info = get_system_info()
    logger.info(
        "aocbench bootstrap complete",
        extra={
            "python_version": system_info.python_version,
            "implementation": system_info.implementation,
            "platform": system_info.platform,
            "architecture": system_info.architecture,
            "env_file_loaded": env_loaded,
        },
    )
