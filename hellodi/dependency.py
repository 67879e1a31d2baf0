"""
The output capability the greeter depends on
"""

from abc import ABC, abstractmethod


class Dependency(ABC):
    """Abstract output capability: emit a string somewhere."""

    @abstractmethod
    def output(self, message: str) -> None:
        """Emit the message"""
        pass
