"""Zone file preprocessing: joins parenthesised records onto one line."""

from __future__ import annotations

import re
from typing import Iterator

_PIECE = re.compile(r"\(|\)|\n|;[^\n]*|[^();\n]+")


def _pieces(text: str) -> Iterator[str]:
    for match in _PIECE.finditer(text):
        yield match.group(0)


def preprocess(text: str) -> str:
    """Replace newlines and comments inside parentheses with spaces.

    Parentheses let a record span several lines. Each newline or comment
    found while a parenthesis is open becomes as many spaces as it is
    long. Everything else, including text outside parentheses, is kept
    as it is, so positions in the output match positions in the input.
    """
    opens = 0
    out: list[str] = []
    for piece in _pieces(text):
        if piece == "(":
            opens += 1
            out.append(piece)
        elif piece == ")":
            opens -= 1
            out.append(piece)
        elif piece == "\n" or piece.startswith(";"):
            if opens > 0:
                out.append(" " * len(piece.encode("utf-8")))
            else:
                out.append(piece)
        else:
            out.append(piece)
    return "".join(out)