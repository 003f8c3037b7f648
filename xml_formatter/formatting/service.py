"""
Format and minify operations exposed to UI and CLI callers.

Both operations run the same well-formedness check first and only transform
text the parser accepted. Errors are returned inside ``FormatResult``; they are
never raised across this boundary.
"""

from functools import lru_cache
from typing import Callable, Optional

import structlog

from .formatter import XMLFormatter
from .types import FormatResult, FormattingError, FormattingOptions
from .validator import GENERIC_DIAGNOSTIC, WellFormednessValidator


logger = structlog.get_logger(__name__)


class XMLFormattingService:
    """Validate-then-transform pipeline behind ``format_xml`` and ``minify_xml``."""

    def __init__(
        self,
        options: Optional[FormattingOptions] = None,
        validator: Optional[WellFormednessValidator] = None,
        formatter: Optional[XMLFormatter] = None,
    ):
        self.options = options or FormattingOptions()
        self.validator = validator or WellFormednessValidator()
        self.formatter = formatter or XMLFormatter(self.options)
        self.logger = logger.bind(component="XMLFormattingService")

    def format(self, xml_content: str, indent_size: Optional[int] = None) -> FormatResult:
        """
        Pretty-print XML content.

        Args:
            xml_content: Raw XML text
            indent_size: Spaces per nesting level; defaults to the configured size

        Returns:
            Indented document, or the input unchanged with a diagnostic
        """
        if indent_size is None:
            indent_size = self.options.indent_size

        return self._check_then_transform(
            xml_content,
            "format",
            lambda text: self.formatter.pretty_print(text, indent_size),
        )

    def minify(self, xml_content: str) -> FormatResult:
        """
        Minify XML content.

        Args:
            xml_content: Raw XML text

        Returns:
            Single-line document, or the input unchanged with a diagnostic
        """
        return self._check_then_transform(xml_content, "minify", self.formatter.minify)

    def _check_then_transform(
        self,
        xml_content: str,
        operation: str,
        transform: Callable[[str], str],
    ) -> FormatResult:
        if not xml_content.strip():
            return FormatResult.success("")

        validation = self.validator.validate(xml_content)
        if not validation.well_formed:
            self.logger.info("Rejected malformed XML",
                             operation=operation,
                             summary=validation.summary(),
                             line=validation.line,
                             column=validation.column)
            return FormatResult.failure(xml_content, validation.diagnostic)

        try:
            result = FormatResult.success(transform(xml_content))
        except FormattingError as e:
            self.logger.warning("XML transform rejected its arguments",
                                operation=operation,
                                error=str(e))
            return FormatResult.failure(xml_content, str(e))
        except Exception as e:
            self.logger.error("XML transform failed",
                              operation=operation,
                              error=str(e),
                              error_type=type(e).__name__,
                              exc_info=True)
            return FormatResult.failure(xml_content, GENERIC_DIAGNOSTIC)

        self.logger.debug("XML transform completed",
                          operation=operation,
                          original_length=len(xml_content),
                          result_length=len(result.formatted))
        return result


@lru_cache()
def get_service() -> XMLFormattingService:
    return XMLFormattingService()


def format_xml(xml_content: str, indent: int = 2) -> FormatResult:
    """Validate and pretty-print XML text with ``indent`` spaces per level."""
    return get_service().format(xml_content, indent)


def minify_xml(xml_content: str) -> FormatResult:
    """Validate and minify XML text."""
    return get_service().minify(xml_content)
