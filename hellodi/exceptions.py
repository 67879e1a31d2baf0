"""
Custom exceptions for hellodi
"""

from typing import Any, Dict, List, Optional


class HelloDIException(Exception):
    """Base exception for hellodi"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class DeveloperFriendlyError(HelloDIException):
    """Base class for errors with helpful debugging information."""

    def __init__(
        self,
        message: str,
        debug_info: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.debug_info = debug_info or {}
        self.suggestions = suggestions or []

        full_message = f"{message}\n"

        if self.debug_info:
            full_message += "\nDebug Information:\n"
            for key, value in self.debug_info.items():
                full_message += f"  {key}: {value}\n"

        if self.suggestions:
            full_message += "\nSuggestions:\n"
            for i, suggestion in enumerate(self.suggestions, 1):
                full_message += f"  {i}. {suggestion}\n"

        super().__init__(full_message, details={"debug_info": self.debug_info})
        # Keep the short form around for log lines and CLI output
        self.summary = message


class DependencyError(DeveloperFriendlyError):
    """Raised when a component cannot be wired to its dependency."""

    def __init__(self, message: str, component: str, debug_info: dict = None, suggestions: list = None):
        self.component = component
        info = {"component": component}
        info.update(debug_info or {})
        super().__init__(message, debug_info=info, suggestions=suggestions)


class MissingDependencyError(DependencyError):
    """Raised when None is passed where a dependency is required."""

    def __init__(self, component: str = "Library"):
        super().__init__(
            message=f"{component} requires a dependency but none was supplied",
            component=component,
            suggestions=[
                f"Pass a Dependency implementation to {component}(...)",
                "Use hellodi.app.create_library() to get the console implementation",
            ],
        )


class InvalidDependencyError(DependencyError):
    """Raised when the supplied object does not provide output(message)."""

    def __init__(self, component: str, supplied: Any):
        self.supplied_type = type(supplied).__name__
        super().__init__(
            message=f"{component} received an object that cannot output messages: {self.supplied_type}",
            component=component,
            debug_info={"supplied_type": self.supplied_type},
            suggestions=[
                "Subclass hellodi.Dependency and implement output(message)",
                "Or provide any object with a callable output(message) method",
            ],
        )
