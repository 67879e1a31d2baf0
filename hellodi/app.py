"""
Composition root: picks the concrete output and wires it into the greeter
"""

import logging
from typing import Optional

from .dependency import Dependency
from .library import Library
from .outputs import ConsoleDependency

logger = logging.getLogger(__name__)


def create_library(dependency: Optional[Dependency] = None) -> Library:
    """Build a Library, writing to the console unless told otherwise"""
    if dependency is None:
        dependency = ConsoleDependency()
    logger.debug(f"Wiring Library to {type(dependency).__name__}")
    return Library(dependency)


def run() -> None:
    create_library().say_hello()
