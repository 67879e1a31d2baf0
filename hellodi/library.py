"""
Greeter component
"""

import logging

from .dependency import Dependency
from .exceptions import InvalidDependencyError, MissingDependencyError

logger = logging.getLogger(__name__)

GREETING = "Hello World"


class Library:
    """
    Greets through an injected output capability.

    The dependency is handed in by the caller and never built here, so a
    test can swap the console for a fake without touching this class.
    """

    def __init__(self, dependency: Dependency):
        if dependency is None:
            raise MissingDependencyError(type(self).__name__)
        if not callable(getattr(dependency, "output", None)):
            raise InvalidDependencyError(type(self).__name__, dependency)
        self._dependency = dependency

    @property
    def dependency(self) -> Dependency:
        return self._dependency

    def say_hello(self) -> None:
        """Send the greeting to the held dependency"""
        logger.debug(f"Greeting via {type(self._dependency).__name__}")
        self._dependency.output(GREETING)
