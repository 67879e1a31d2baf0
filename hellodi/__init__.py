"""
hellodi - constructor injection of an output capability into a greeter
"""

from .app import create_library, run
from .dependency import Dependency
from .exceptions import (
    DependencyError,
    DeveloperFriendlyError,
    HelloDIException,
    InvalidDependencyError,
    MissingDependencyError,
)
from .library import GREETING, Library
from .outputs import ConsoleDependency

__version__ = "1.0.0"

__all__ = [
    "ConsoleDependency",
    "Dependency",
    "DependencyError",
    "DeveloperFriendlyError",
    "GREETING",
    "HelloDIException",
    "InvalidDependencyError",
    "Library",
    "MissingDependencyError",
    "create_library",
    "run",
]
