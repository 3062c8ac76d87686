"""Custom exceptions for HTML Interpreter."""

from typing import Optional


class HtmlInterpreterError(Exception):
    """Base exception for HTML Interpreter errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ParsingError(HtmlInterpreterError):
    """Exception raised while reading markup input."""

    pass


class StyleError(HtmlInterpreterError):
    """Exception raised during style resolution."""

    pass


class RenderingError(HtmlInterpreterError):
    """Exception raised while writing content to the output document."""

    pass


class GeometryError(HtmlInterpreterError):
    """Exception raised when content cannot be placed on a page."""

    pass
