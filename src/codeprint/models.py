"""Data models for the codeprint layout engine."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple

from codeprint.constants import (
    DEFAULT_LINE_HEIGHT,
    DEFAULT_LINES_PER_PAGE,
    DEFAULT_PAGE_HEIGHT,
    DEFAULT_PROJECT_NAME,
    DEFAULT_TOTAL_PAGES,
)
from codeprint.errors import InvalidConfig


@dataclass(frozen=True)
class LayoutConfig:
    """Immutable per-run layout parameters. Heights are in millimetres."""

    lines_per_page: int = DEFAULT_LINES_PER_PAGE
    total_pages: int = DEFAULT_TOTAL_PAGES
    page_height: float = DEFAULT_PAGE_HEIGHT
    line_height: float = DEFAULT_LINE_HEIGHT

    def __post_init__(self) -> None:
        for name in ("lines_per_page", "total_pages"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidConfig(f"{name} must be a positive integer, got {value!r}")
        for name in ("page_height", "line_height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                raise InvalidConfig(f"{name} must be a positive number, got {value!r}")

    @property
    def page_capacity_lines(self) -> int:
        """Maximum number of lines rendered in full before head/tail truncation applies."""
        return self.lines_per_page * self.total_pages

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lines_per_page": self.lines_per_page,
            "total_pages": self.total_pages,
            "page_height": self.page_height,
            "line_height": self.line_height,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LayoutConfig":
        return cls(
            lines_per_page=data.get("lines_per_page", DEFAULT_LINES_PER_PAGE),
            total_pages=data.get("total_pages", DEFAULT_TOTAL_PAGES),
            page_height=data.get("page_height", DEFAULT_PAGE_HEIGHT),
            line_height=data.get("line_height", DEFAULT_LINE_HEIGHT),
        )


@dataclass(frozen=True)
class Chunk:
    """A contiguous range of a document's lines, addressed by 1-based original line numbers."""

    start_line: int
    end_line: int
    lines: Tuple[str, ...] = ()

    @property
    def content(self) -> str:
        return "\n".join(self.lines)

    def __len__(self) -> int:
        return len(self.lines)


@dataclass(frozen=True)
class Row:
    """One line's rendering unit: page-local number and verbatim text."""

    number: int
    text: str


@dataclass(frozen=True)
class Page:
    """One planned page. `break_before` tells the sink to open a new sheet before drawing it."""

    rows: Tuple[Row, ...]
    break_before: bool = False

    def __len__(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class RunConfig:
    """Everything one CLI invocation needs."""

    input_path: Path
    output_path: Path
    project_name: str = DEFAULT_PROJECT_NAME
    layout: LayoutConfig = field(default_factory=LayoutConfig)


@dataclass(frozen=True)
class RunResult:
    output_path: Path
    file_count: int
    line_count: int
    dropped_lines: int
    page_count: int
