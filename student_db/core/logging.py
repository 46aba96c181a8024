"""
Logging bootstrap.

WHAT: One call that wires the root logger for applications embedding
student_db.

WHY: Library modules only ever do ``logging.getLogger(__name__)``; they never
install handlers on import. Whoever owns the process decides where records
go, and this helper gives them the package defaults in one line.
"""

import logging
from typing import Optional

from student_db.core.config import Settings, settings as default_settings

PACKAGE_LOGGER_NAME = "student_db"


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Configure root logging from settings.

    Args:
        settings: Settings to read LOG_LEVEL / LOG_FORMAT / DEBUG from.
            Defaults to the module-level settings instance.

    Returns:
        The package root logger (``student_db``)

    Example:
        >>> from student_db.core.logging import configure_logging
        >>> configure_logging()
    """
    settings = settings or default_settings
    level = settings.effective_log_level

    logging.basicConfig(level=level, format=settings.LOG_FORMAT)

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    return package_logger
