"""Reading and writing garden design files.

A design file is line-oriented text. Blank lines and lines starting with
``#`` are ignored; every other line must describe one bed, e.g.::

    # two beds either side of a path
    rectangle 2.0 1.0
    RECTANGLE 2.0 1.0

The shape keyword is case-insensitive and fields may be separated by any
run of whitespace.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from .value_objects import BedShape, GeometryError, Rectangle

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"

# Plain ASCII decimals with an optional exponent, e.g. "2", "-1.5", ".5", "3e2".
DECIMAL_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


class DesignParseError(ValueError):
    """Raised when a design file line is not a valid bed statement.

    Attributes:
        line: The offending line, as it appeared in the input (trimmed).
        line_number: 1-based line number, when known.
        reason: Category of failure ("malformed" or "invalid_number").
    """

    def __init__(
        self,
        line: str,
        line_number: int | None = None,
        reason: str = "malformed",
    ) -> None:
        self.line = line
        self.line_number = line_number
        self.reason = reason
        message = f"illegal garden bed: {line}"
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


def parse_bed_line(line: str, line_number: int | None = None) -> Rectangle | None:
    """Parse a single design file line.

    Args:
        line: Raw line text, with or without the trailing newline.
        line_number: Optional 1-based line number used in error messages.

    Returns:
        The bed described by the line, or None for blank and comment lines.

    Raises:
        DesignParseError: If the line is neither blank, a comment, nor a
            valid ``rectangle <width> <height>`` statement.
    """
    text = line.strip()
    if not text or text.startswith(COMMENT_PREFIX):
        return None

    words = text.split()
    if len(words) != 3 or words[0].lower() != BedShape.RECTANGLE.value:
        raise DesignParseError(text, line_number)

    if not all(DECIMAL_PATTERN.fullmatch(word) for word in words[1:]):
        raise DesignParseError(text, line_number, reason="invalid_number")

    try:
        return Rectangle(float(words[1]), float(words[2]))
    except (ValueError, GeometryError) as e:
        raise DesignParseError(text, line_number, reason="invalid_number") from e


def parse_beds(lines: Iterable[str]) -> list[Rectangle]:
    """Parse every line of a design, in order.

    The first bad line aborts the whole parse.

    Raises:
        DesignParseError: On the first line that is not a valid statement.
    """
    beds: list[Rectangle] = []
    for line_number, line in enumerate(lines, start=1):
        bed = parse_bed_line(line, line_number)
        if bed is not None:
            beds.append(bed)
    logger.debug(f"Parsed {len(beds)} beds from design")
    return beds


def format_beds(beds: Iterable[Rectangle], header: str | None = None) -> str:
    """Write beds back out in design file format.

    Args:
        beds: Beds to write, in order.
        header: Optional free text emitted as leading comment lines.

    Returns:
        Design file text ending with a newline.
    """
    lines: list[str] = []
    if header:
        lines.extend(f"{COMMENT_PREFIX} {row}".rstrip() for row in header.splitlines())
    lines.extend(str(bed) for bed in beds)
    return "\n".join(lines) + "\n"
