"""
Tag-boundary tokenization of XML text.

The formatter never rebuilds a tree; it rewrites the author's text line by
line. This module cuts the text into nodes (tags, text runs, comments, CDATA
sections, processing instructions, doctype) and groups them into the lines the
pretty-printer indents.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List


class NodeKind(Enum):
    """Kinds of text fragments produced by the tokenizer."""
    START_TAG = "start_tag"
    END_TAG = "end_tag"
    SELF_CLOSING_TAG = "self_closing_tag"
    TEXT = "text"
    COMMENT = "comment"
    CDATA = "cdata"
    PROCESSING_INSTRUCTION = "processing_instruction"
    DOCTYPE = "doctype"


@dataclass(frozen=True)
class Node:
    """A fragment of the source text."""

    kind: NodeKind
    text: str

    @property
    def is_markup(self) -> bool:
        return self.kind is not NodeKind.TEXT


# XML's S production; narrower than str.isspace()
XML_WHITESPACE = " \t\r\n"

_TOKEN_PATTERN = re.compile(
    r"""
    (?P<comment><!--.*?-->)
    | (?P<cdata><!\[CDATA\[.*?\]\]>)
    | (?P<pi><\?.*?\?>)
    | (?P<doctype><!DOCTYPE
        (?:"[^"]*"|'[^']*'|[^\[>"']
          | \[(?:"[^"]*"|'[^']*'|<!--.*?-->|<(?!!--)|[^\]"'<])*\]  # internal subset
        )*>)
    | (?P<tag></?[^\s<>/!?][^\s<>/]*(?:\s+[^\s<>=/]+\s*=\s*(?:"[^"]*"|'[^']*'))*\s*/?>)
    | (?P<text>[^<]+)
    | (?P<stray><)
    """,
    re.DOTALL | re.VERBOSE,
)

_GROUP_KINDS = {
    "comment": NodeKind.COMMENT,
    "cdata": NodeKind.CDATA,
    "pi": NodeKind.PROCESSING_INSTRUCTION,
    "doctype": NodeKind.DOCTYPE,
    "text": NodeKind.TEXT,
    "stray": NodeKind.TEXT,
}


def _tag_kind(tag: str) -> NodeKind:
    if tag.startswith("</"):
        return NodeKind.END_TAG
    if tag.endswith("/>"):
        return NodeKind.SELF_CLOSING_TAG
    return NodeKind.START_TAG


def is_blank(text: str) -> bool:
    """True for empty text or text made only of XML whitespace."""
    return not text.strip(XML_WHITESPACE)


def tokenize(xml_content: str) -> List[Node]:
    """
    Split XML text into nodes at tag boundaries.

    Markup that cannot be recognised (a stray ``<`` in malformed input) is
    folded into the surrounding text, so concatenating the node texts always
    reproduces the input.
    """
    nodes: List[Node] = []

    for match in _TOKEN_PATTERN.finditer(xml_content):
        group = match.lastgroup
        text = match.group()
        kind = _tag_kind(text) if group == "tag" else _GROUP_KINDS[group]

        if kind is NodeKind.TEXT and nodes and nodes[-1].kind is NodeKind.TEXT:
            nodes[-1] = Node(NodeKind.TEXT, nodes[-1].text + text)
        else:
            nodes.append(Node(kind, text))

    return nodes


def split_lines(nodes: List[Node]) -> List[List[Node]]:
    """
    Group nodes into lines, breaking between every two adjacent markup nodes.

    Whitespace-only text sitting between markup is dropped; any other text
    stays on the line of the tags around it.
    """
    lines: List[List[Node]] = []
    current: List[Node] = []

    for node in nodes:
        if node.kind is NodeKind.TEXT and is_blank(node.text):
            continue

        if current and node.is_markup and current[-1].is_markup:
            lines.append(current)
            current = []

        current.append(node)

    if current:
        lines.append(current)

    return lines
