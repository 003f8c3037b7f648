"""
XML well-formedness checking using lxml.
"""

import structlog
from lxml import etree

from .types import ValidationResult


logger = structlog.get_logger(__name__)

GENERIC_DIAGNOSTIC = "Invalid XML"


class WellFormednessValidator:
    """
    Checks raw text against the XML 1.0 well-formedness rules.

    No schema is involved: the parser only decides whether the text is a single,
    properly nested, properly escaped document. External entities, DTD loading
    and network access are disabled.
    """

    def __init__(self):
        self.logger = logger.bind(component="WellFormednessValidator")

    def _make_parser(self) -> etree.XMLParser:
        # One parser per document
        return etree.XMLParser(
            resolve_entities=False,
            # validate() always feeds UTF-8 bytes, whatever the declaration says
            encoding="utf-8",
            no_network=True,
            load_dtd=False,
            huge_tree=False,
        )

    def validate(self, xml_content: str) -> ValidationResult:
        """
        Check whether XML content is well-formed.

        Args:
            xml_content: Raw XML text

        Returns:
            Validation result; never raises
        """
        if not xml_content.strip():
            return ValidationResult.ok()

        try:
            self.logger.debug("Checking well-formedness", content_length=len(xml_content))

            etree.fromstring(xml_content.encode("utf-8"), self._make_parser())

            return ValidationResult.ok()

        except etree.XMLSyntaxError as e:
            return self._create_parse_error_result(e)

        except Exception as e:
            self.logger.error("Unexpected error during well-formedness check",
                              error=str(e), error_type=type(e).__name__, exc_info=True)
            return ValidationResult.failed(GENERIC_DIAGNOSTIC)

    def _create_parse_error_result(self, parse_error: etree.XMLSyntaxError) -> ValidationResult:
        """Create validation result for XML parse errors."""
        message = parse_error.msg or str(parse_error) or GENERIC_DIAGNOSTIC
        line = parse_error.lineno
        column = parse_error.offset

        diagnostic = f"XML parsing error: {message}"
        if line is not None and f"line {line}" not in message:
            diagnostic += f" (line {line}, column {column})"

        self.logger.warning("XML parse error",
                            message=message,
                            line=line,
                            column=column)

        return ValidationResult.failed(diagnostic, line=line, column=column)
