"""
XML validation, pretty-printing and minification.

This module provides:
- lxml-based well-formedness checking with located diagnostics
- Text-level pretty-printing that keeps attribute order and quoting
- Whitespace-collapsing minification
- FormatResult values that carry errors as data
"""

from .formatter import XMLFormatter
from .service import XMLFormattingService, format_xml, minify_xml
from .tokenizer import Node, NodeKind, split_lines, tokenize
from .types import (
    FormatResult,
    FormattingError,
    FormattingOptions,
    ValidationResult,
    XMLError,
)
from .validator import WellFormednessValidator

__all__ = [
    # Operations
    "format_xml",
    "minify_xml",
    # Core classes
    "XMLFormattingService",
    "WellFormednessValidator",
    "XMLFormatter",
    # Tokenization
    "Node",
    "NodeKind",
    "tokenize",
    "split_lines",
    # Values and configuration
    "FormatResult",
    "FormattingOptions",
    "ValidationResult",
    # Exceptions
    "XMLError",
    "FormattingError",
]
