"""
Logging configuration for the screenflow runtime.

Call ``configure_logging()`` once at application startup. Library modules only
bind their own ``module`` name and never add sinks themselves.
"""

import sys
from typing import Any, Dict, List, Optional

from loguru import logger

from .config import get_runtime_section

LOG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[module]}</cyan> - <level>{message}</level>"
)


def configure_logging(settings: Optional[Dict[str, Any]] = None) -> List[int]:
    """
    Configure loguru sinks from the ``[logging]`` config section.

    Args:
        settings: Overrides for the ``[logging]`` section; keys that are
            missing fall back to the loaded configuration.

    Returns:
        The handler ids that were added.
    """
    options = get_runtime_section("logging")
    options.update(settings or {})
    level = str(options.get("level", "INFO")).upper()

    logger.remove()  # Remove default handler
    logger.configure(extra={"module": "screenflow"})
    handler_ids = []

    if options.get("console", True):
        handler_ids.append(logger.add(sink=sys.stderr, level=level, format=LOG_FORMAT, colorize=True))

    log_file = options.get("log_file") or ""
    if log_file:
        handler_ids.append(
            logger.add(
                sink=log_file,
                level=level,
                format=LOG_FORMAT,
                rotation=options.get("rotation", "10 MB"),
                retention=options.get("retention", "7 days"),
            )
        )

    logger.bind(module="logging_config").info(f"screenflow logging configured: level={level}, file={log_file or 'off'}")
    return handler_ids
