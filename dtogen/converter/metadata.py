"""Capture of multi-line @Column({ ... }) blocks by parenthesis balancing."""
import logging
from dataclasses import dataclass
from typing import List

log = logging.getLogger(__name__)


@dataclass
class ColumnBlock:
    """Raw text of a column decorator block and where it ends."""
    text: str
    end: int  # Index of the last consumed line
    closed: bool  # False when the source ran out before the parens balanced


def extract_column_meta(lines: List[str], start: int) -> ColumnBlock:
    """
    Collect lines from ``start`` until the parenthesis depth returns to zero.

    Depth is accumulated per line as the count of "(" minus the count of ")".
    The lines are kept unmodified and joined with newlines. An unbalanced block
    runs to the end of the source and is reported with ``closed=False``.

    Args:
        lines: Source lines (not trimmed)
        start: Index of the line holding the column decorator

    Returns:
        ColumnBlock with the captured text and the index of its last line
    """
    collected: List[str] = []
    depth = 0
    for index in range(start, len(lines)):
        line = lines[index]
        collected.append(line)
        depth += line.count("(")
        depth -= line.count(")")
        if depth <= 0:
            return ColumnBlock(text="\n".join(collected), end=index, closed=True)

    log.warning(
        "Unterminated column decorator starting at line %d; captured to end of source",
        start + 1,
        extra={"stage": "PARSE"},
    )
    return ColumnBlock(text="\n".join(collected), end=len(lines) - 1, closed=False)
