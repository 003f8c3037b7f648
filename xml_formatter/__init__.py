"""
XML Formatter.

Validates, pretty-prints and minifies XML documents. Formatting rewrites the
author's text instead of re-serializing a parsed tree, so attribute order and
quoting survive untouched.

Typical use:

    from xml_formatter import format_xml, minify_xml

    result = format_xml("<root><child>text</child></root>")
    if result.is_valid:
        print(result.formatted)
"""

__version__ = "0.1.0"

from .formatting import (
    FormatResult,
    FormattingError,
    FormattingOptions,
    XMLError,
    XMLFormattingService,
    format_xml,
    minify_xml,
)

__all__ = [
    "__version__",
    "format_xml",
    "minify_xml",
    "XMLFormattingService",
    "FormatResult",
    "FormattingOptions",
    "XMLError",
    "FormattingError",
]
