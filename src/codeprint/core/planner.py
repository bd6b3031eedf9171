"""
Page planning: splits a line sequence into pages under a vertical space budget.

Break placement uses a cheap estimate (rows * line height). After each page has
been drawn the budget is corrected from the render target's cursor, because a
wrapped row can take more than one line height.
"""

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from itertools import islice
from typing import Optional, Protocol

from codeprint.models import LayoutConfig, Page, Row

logger = logging.getLogger(__name__)


class RenderSink(Protocol):
    """What the planner needs from a render target."""

    def begin_document(self, header: str, footer: str) -> None: ...

    def add_page(self) -> None: ...

    def draw_row(self, line_number: int, text: str) -> None: ...

    def finish_block(self) -> None: ...

    def current_vertical_position(self) -> float: ...

    @property
    def page_count(self) -> int: ...

    def finish(self, output_path) -> None: ...


class SpaceBudget:
    """Vertical space left on the page that is currently open."""

    def __init__(self, page_height: float, line_height: float, start_offset: float = 0.0):
        self.page_height = page_height
        self.line_height = line_height
        self.remaining = page_height - start_offset

    def estimate(self, row_count: int) -> float:
        return row_count * self.line_height

    def fits(self, row_count: int) -> bool:
        return self.estimate(row_count) <= self.remaining

    def start_page(self) -> None:
        self.remaining = self.page_height

    def consume(self, amount: float) -> None:
        self.remaining -= amount

    def reconcile(self, cursor_position: float) -> None:
        self.remaining = self.page_height - cursor_position


def _batches(lines: Iterable[str], size: int) -> Iterator[list[str]]:
    it = iter(lines)
    while batch := list(islice(it, size)):
        yield batch


class PagePlanner:
    def __init__(self, config: LayoutConfig):
        self.config = config

    def plan(
        self,
        lines: Iterable[str],
        start_offset: float = 0.0,
        cursor: Optional[Callable[[], float]] = None,
    ) -> Iterator[Page]:
        """
        Lazily yields one Page per batch of `lines_per_page` lines.

        `start_offset` is the vertical position already used on the open page.
        When `cursor` is given it is read after each yielded page has been consumed
        and replaces the running estimate; without it the estimate is trusted.
        """
        budget = SpaceBudget(self.config.page_height, self.config.line_height, start_offset)
        for batch in _batches(lines, self.config.lines_per_page):
            needed = budget.estimate(len(batch))
            break_before = not budget.fits(len(batch))
            if break_before:
                budget.start_page()
            yield Page(
                rows=tuple(Row(number=i, text=text) for i, text in enumerate(batch, start=1)),
                break_before=break_before,
            )
            if cursor is not None:
                budget.reconcile(cursor())
            else:
                budget.consume(needed)


def plan_pages(lines: Sequence[str], config: LayoutConfig, start_offset: float = 0.0) -> list[Page]:
    """Materializes an estimate-only plan."""
    return list(PagePlanner(config).plan(lines, start_offset=start_offset))


def render_lines(lines: Iterable[str], config: LayoutConfig, sink: RenderSink) -> int:
    """Plans `lines` and draws them into `sink`. Returns the number of planned pages."""
    planner = PagePlanner(config)
    page_count = 0
    for page in planner.plan(
        lines,
        start_offset=sink.current_vertical_position(),
        cursor=sink.current_vertical_position,
    ):
        if page.break_before:
            sink.add_page()
        for row in page.rows:
            sink.draw_row(row.number, row.text)
        sink.finish_block()
        page_count += 1
    logger.debug("Planned %d pages", page_count)
    return page_count
