"""Head/tail selection for documents too long to render in full."""

import logging
from collections.abc import Sequence

from codeprint.models import Chunk, LayoutConfig

logger = logging.getLogger(__name__)


def select_chunks(lines: Sequence[str], config: LayoutConfig) -> list[Chunk]:
    """
    Returns the chunks of `lines` to render.

    A document that fits within `config.page_capacity_lines` comes back as a single
    chunk [1, len(lines)]. A longer one is reduced to its first and last
    `page_capacity_lines // 2` lines; the middle is dropped without any marker.
    """
    total = len(lines)
    capacity = config.page_capacity_lines
    if total <= capacity:
        return [Chunk(start_line=1, end_line=total, lines=tuple(lines))]

    half = capacity // 2
    tail_start = total - half
    head = Chunk(start_line=1, end_line=half, lines=tuple(lines[:half]))
    tail = Chunk(start_line=tail_start + 1, end_line=total, lines=tuple(lines[tail_start:]))
    logger.info(
        "Document has %d lines (cap %d): keeping lines %d-%d and %d-%d",
        total,
        capacity,
        head.start_line,
        head.end_line,
        tail.start_line,
        tail.end_line,
    )
    return [head, tail]


def dropped_line_count(lines: Sequence[str], config: LayoutConfig) -> int:
    """Number of lines select_chunks leaves out."""
    total = len(lines)
    if total <= config.page_capacity_lines:
        return 0
    return total - 2 * (config.page_capacity_lines // 2)
