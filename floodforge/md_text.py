"""A small markdown subset: headings, quotes, rules and inline styles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Tuple, Union

PathLike = Union[str, Path]


@dataclass
class StyledText:
    """A run of text sharing one set of inline styles."""

    text: str
    italic: bool = False
    bold: bool = False
    underline: bool = False
    strikethrough: bool = False
    code: bool = False
    url: str = ""


class LineType(Enum):
    TEXT = "text"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    QUOTE = "quote"
    HORIZONTAL_RULE = "horizontal_rule"


MarkdownLine = Tuple[LineType, List[StyledText]]

_TOGGLES = {"**": "bold", "~~": "strikethrough", "__": "underline"}


def parse_styled_text(line: str) -> List[StyledText]:
    """Split a line into styled runs.

    Supports ``\\`` escapes, `` `code` ``, ``**bold**``, ``~~strike~~``,
    ``__underline__``, ``*italic*`` / ``_italic_`` and ``[text](url)`` links.
    """
    result: List[StyledText] = []
    style = {"italic": False, "bold": False, "underline": False, "strikethrough": False}
    current = ""
    code = False
    in_link = False

    def push(text: str) -> None:
        result.append(StyledText(text, **style))

    i = 0
    while i < len(line):
        char = line[i]
        pair = line[i : i + 2]

        if char == "\\":
            if i + 1 < len(line):
                current += line[i + 1]
                i += 1
        elif code:
            if char == "`":
                code = False
                result.append(StyledText(current, code=True))
                current = ""
            else:
                current += char
        elif char == "`":
            push(current)
            current = ""
            code = True
        elif pair in _TOGGLES:
            push(current)
            current = ""
            name = _TOGGLES[pair]
            style[name] = not style[name]
            i += 1
        elif char in "*_":
            push(current)
            current = ""
            style["italic"] = not style["italic"]
        elif char == "[":
            push(current + " ")
            current = ""
            in_link = True
        elif char == "]":
            if in_link:
                result.append(StyledText(current))
            else:
                current += char
        elif char == "(":
            if in_link:
                current = ""
            else:
                current += char
        elif char == ")":
            if in_link:
                last = result.pop()
                result.append(
                    StyledText(
                        last.text,
                        italic=style["italic"],
                        bold=style["bold"],
                        underline=True,
                        strikethrough=style["strikethrough"],
                        url=current,
                    )
                )
                current = ""
                in_link = False
            else:
                current += char
        else:
            current += char
        i += 1

    if current:
        result.append(StyledText(current))
    return result


def _is_rule(line: str) -> bool:
    return any(line.startswith(mark * 3) and set(line) == {mark} for mark in "-*_")


def parse_markdown(text: str) -> List[MarkdownLine]:
    """Parse a document into typed lines of styled runs.

    A blank line between two text or quote lines becomes an empty TEXT line.
    """
    lines: List[MarkdownLine] = []
    pending_blank = 0

    raw_lines = text.split("\n")
    if raw_lines and raw_lines[-1] == "":
        raw_lines.pop()

    for line in raw_lines:
        if not line:
            pending_blank = 2 if pending_blank == 1 else 0
            continue

        line = line.removesuffix("\r")
        line_type = LineType.TEXT

        if line.startswith("# "):
            line_type, line, pending_blank = LineType.H1, line[2:], 0
        elif line.startswith("## "):
            line_type, line, pending_blank = LineType.H2, line[3:], 0
        elif line.startswith("### "):
            line_type, line, pending_blank = LineType.H3, line[4:], 0
        elif line.startswith("> "):
            if pending_blank == 2:
                lines.append((LineType.TEXT, []))
            pending_blank = 1
            line_type, line = LineType.QUOTE, line[2:]
        elif _is_rule(line):
            lines.append((LineType.HORIZONTAL_RULE, []))
            pending_blank = 0
            continue
        else:
            if pending_blank == 2:
                lines.append((LineType.TEXT, []))
            pending_blank = 1

        lines.append((line_type, parse_styled_text(line)))

    return lines


def load_markdown(path: PathLike) -> List[MarkdownLine]:
    """Read and parse a markdown file; raises FileNotFoundError if it is missing."""
    return parse_markdown(Path(path).read_text(encoding="utf-8"))