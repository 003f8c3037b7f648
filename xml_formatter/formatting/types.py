"""
Type definitions for XML formatting module.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


class XMLError(Exception):
    """Base exception for XML formatter errors."""
    pass


class FormattingError(XMLError):
    """XML formatting error."""
    pass


LINE_SEPARATORS = ("\n", "\r\n")


@dataclass
class FormattingOptions:
    """Options for XML formatting."""

    # Indentation settings
    indent_size: int = 2

    # Separator placed between emitted lines
    line_separator: str = "\n"

    def __post_init__(self):
        if self.indent_size < 0:
            raise FormattingError(f"Indent size must be non-negative, got {self.indent_size}")
        if self.line_separator not in LINE_SEPARATORS:
            raise FormattingError(f"Unsupported line separator: {self.line_separator!r}")


@dataclass
class ValidationResult:
    """Result of an XML well-formedness check."""

    well_formed: bool
    diagnostic: Optional[str] = None

    # Location of the first error, when the parser reports one
    line: Optional[int] = None
    column: Optional[int] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(well_formed=True)

    @classmethod
    def failed(cls, diagnostic: str, line: Optional[int] = None, column: Optional[int] = None) -> "ValidationResult":
        return cls(well_formed=False, diagnostic=diagnostic or "Invalid XML", line=line, column=column)

    def summary(self) -> str:
        """Get validation summary."""
        if self.well_formed:
            return "Well-formed XML"
        return f"Malformed XML: {self.diagnostic}"


@dataclass(frozen=True)
class FormatResult:
    """
    Outcome of a format or minify call.

    On failure ``formatted`` holds the caller's input unchanged and ``error``
    carries the diagnostic; ``error`` is set exactly when ``is_valid`` is false.
    """

    formatted: str
    is_valid: bool
    error: Optional[str] = None

    def __post_init__(self):
        if self.is_valid and self.error is not None:
            raise ValueError("A valid result cannot carry an error")
        if not self.is_valid and not self.error:
            raise ValueError("An invalid result requires an error message")

    @classmethod
    def success(cls, formatted: str) -> "FormatResult":
        return cls(formatted=formatted, is_valid=True)

    @classmethod
    def failure(cls, original: str, error: str) -> "FormatResult":
        return cls(formatted=original, is_valid=False, error=error)

    def to_dict(self) -> Dict[str, Any]:
        """Render the result in the shape exchanged with UI callers."""
        data: Dict[str, Any] = {
            "formatted": self.formatted,
            "isValid": self.is_valid,
        }
        if self.error is not None:
            data["error"] = self.error
        return data
