"""
Text-level XML pretty-printing and minification.

Both transforms work on the serialized text rather than on a parsed tree, so
attribute order, quoting and spacing inside tags stay exactly as written.
"""

import re
from typing import List, Optional

import structlog

from .tokenizer import Node, NodeKind, split_lines, tokenize, XML_WHITESPACE
from .types import FormattingOptions, FormattingError


logger = structlog.get_logger(__name__)

_BETWEEN_TAGS = re.compile(r">\s+<")
_WHITESPACE_RUN = re.compile(r"\s+")


class XMLFormatter:
    """
    XML formatter producing indented or single-line renderings.

    The formatter assumes its input is well-formed; it does not re-check
    nesting, and on unbalanced input it simply never indents below column 0.
    """

    def __init__(self, options: Optional[FormattingOptions] = None):
        """
        Initialize XML formatter.

        Args:
            options: Formatting options
        """
        self.options = options or FormattingOptions()
        self.logger = logger.bind(component="XMLFormatter")

    def pretty_print(self, xml_content: str, indent_size: Optional[int] = None) -> str:
        """
        Indent XML content one level per open element.

        Args:
            xml_content: XML content, assumed well-formed
            indent_size: Spaces per level; defaults to the configured size

        Returns:
            Indented XML content
        """
        if indent_size is None:
            indent_size = self.options.indent_size
        if indent_size < 0:
            raise FormattingError(f"Indent size must be non-negative, got {indent_size}")

        lines = split_lines(tokenize(xml_content.strip(XML_WHITESPACE)))
        padding = " " * indent_size

        output = []
        depth = 0
        for line in lines:
            step = 0
            if self._is_inline_leaf(line):
                step = 0
            elif self._is_closing(line) and depth > 0:
                depth -= 1
            elif self._is_opening(line):
                step = 1

            output.append(padding * max(depth, 0) + "".join(node.text for node in line))
            depth += step

        formatted = self.options.line_separator.join(output)

        self.logger.debug("Pretty-printed XML",
                          original_length=len(xml_content),
                          formatted_length=len(formatted),
                          lines=len(output),
                          unclosed_depth=depth)

        return formatted

    def minify(self, xml_content: str) -> str:
        """
        Collapse XML content onto a single line.

        Whitespace between a ``>`` and the next ``<`` is removed, every other
        whitespace run becomes one space, and the ends are trimmed. Unicode
        spaces such as U+00A0 count as whitespace here.

        Args:
            xml_content: XML content, assumed well-formed

        Returns:
            Minified XML content
        """
        minified = _BETWEEN_TAGS.sub("><", xml_content)
        minified = _WHITESPACE_RUN.sub(" ", minified)
        minified = minified.strip()

        self.logger.debug("Minified XML",
                          original_length=len(xml_content),
                          minified_length=len(minified))

        return minified

    @staticmethod
    def _is_inline_leaf(line: List[Node]) -> bool:
        """Opening tag, content and closing tag on one line, e.g. ``<b>x</b>``."""
        return len(line) > 1 and line[-1].kind is NodeKind.END_TAG

    @staticmethod
    def _is_closing(line: List[Node]) -> bool:
        return line[0].kind is NodeKind.END_TAG

    @staticmethod
    def _is_opening(line: List[Node]) -> bool:
        return line[0].kind is NodeKind.START_TAG
