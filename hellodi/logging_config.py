"""
Logging setup for hellodi
"""

import logging
import sys
from typing import Optional

from pydantic import ValidationError

from .settings import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Configure logging to stderr and return the package logger"""
    invalid = None
    if settings is None:
        try:
            settings = get_settings()
        except ValidationError as e:
            # Bad logging config never blocks the greeting
            invalid = e
            settings = Settings.model_construct()

    # stdout carries the greeting only
    logging.basicConfig(
        level=settings.log_level_number,
        format=settings.log_format,
        stream=sys.stderr,
    )
    package_logger = logging.getLogger("hellodi")
    package_logger.setLevel(settings.log_level_number)

    if invalid is not None:
        fields = ", ".join(str(err["loc"][0]) for err in invalid.errors() if err["loc"])
        package_logger.warning(f"Ignoring invalid logging settings ({fields}); using defaults")
    return package_logger
