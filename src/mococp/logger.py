# SPDX-License-Identifier: MIT

import logging
import os
import sys

LOG_ENV_VAR = "MOCOCP_LOG"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(debug: bool = False) -> None:
    """
    Configure stderr logging for the application.

    WARNING by default, DEBUG with --debug. The MOCOCP_LOG environment
    variable (e.g. "INFO") overrides the default level but not --debug.
    """
    level = logging.WARNING
    env_level = os.environ.get(LOG_ENV_VAR)
    if env_level:
        level = logging.getLevelName(env_level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    if debug:
        level = logging.DEBUG

    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("mococp").setLevel(level)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if debug else logging.WARNING)
