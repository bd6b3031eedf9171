import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from codeprint.constants import (
    DEFAULT_FOOTER,
    DEFAULT_LINES_PER_PAGE,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_PROJECT_NAME,
    DEFAULT_TOTAL_PAGES,
)
from codeprint.core.chunking import dropped_line_count, select_chunks
from codeprint.core.planner import RenderSink, render_lines
from codeprint.core.utils import collect_code_files, display_path, ensure_parent_dir, read_lines
from codeprint.errors import CodePrintError, FileAccessError
from codeprint.models import LayoutConfig, RunConfig, RunResult

logger = logging.getLogger(__name__)


def _default_sink() -> RenderSink:
    # Imported lazily so the CLI can report argument errors without starting Qt.
    from codeprint.render.pdf_sink import PdfRenderSink

    return PdfRenderSink()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codeprint",
        description="Render source code into a paginated, line-numbered PDF.",
    )
    parser.add_argument("--input", "-i", required=True, help="Input file or directory path")
    parser.add_argument("--output", "-o", default=DEFAULT_OUTPUT_PATH, help="Output PDF path")
    parser.add_argument("--project", default=DEFAULT_PROJECT_NAME, help="Project name shown in the page header")
    parser.add_argument("--lines-per-page", type=int, default=DEFAULT_LINES_PER_PAGE, help="Lines per page")
    parser.add_argument(
        "--total-pages",
        type=int,
        default=DEFAULT_TOTAL_PAGES,
        help="Pages rendered in full before a single file is reduced to its head and tail",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log progress details")
    return parser


def parse_args(argv: list[str] | None = None) -> tuple[RunConfig, bool]:
    """Parses CLI arguments. Raises InvalidConfig for non-positive layout values."""
    args = build_parser().parse_args(argv)
    layout = LayoutConfig(lines_per_page=args.lines_per_page, total_pages=args.total_pages)
    config = RunConfig(
        input_path=Path(args.input),
        output_path=Path(args.output),
        project_name=args.project,
        layout=layout,
    )
    return config, args.verbose


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def render_file(config: RunConfig, sink: RenderSink) -> tuple[int, int]:
    """Renders a single file, truncated to head and tail when too long. Returns (lines drawn, lines dropped)."""
    lines = read_lines(config.input_path)
    chunks = select_chunks(lines, config.layout)
    drawn = 0
    for chunk in chunks:
        render_lines(chunk.lines, config.layout, sink)
        drawn += len(chunk)
    return drawn, dropped_line_count(lines, config.layout)


def render_directory(config: RunConfig, sink: RenderSink) -> tuple[int, int]:
    """
    Renders every recognized code file under the input directory, concatenated.
    Files are never truncated here, unlike render_file. Returns (file count, lines drawn).
    """
    code_files = collect_code_files(config.input_path)
    drawn = 0
    for file_path in code_files:
        logger.info("Adding %s", display_path(file_path))
        lines = read_lines(file_path)
        render_lines(lines, config.layout, sink)
        drawn += len(lines)
    return len(code_files), drawn


def run(config: RunConfig, sink_factory: Callable[[], RenderSink] = _default_sink) -> RunResult:
    """Renders config.input_path into config.output_path. The first failure aborts the run."""
    input_path = config.input_path
    if not input_path.exists():
        raise FileAccessError(f"Input path does not exist: {input_path}")
    ensure_parent_dir(config.output_path)

    sink = sink_factory()
    sink.begin_document(config.project_name, DEFAULT_FOOTER)
    if input_path.is_dir():
        file_count, line_count = render_directory(config, sink)
        dropped = 0
    else:
        file_count = 1
        line_count, dropped = render_file(config, sink)
    sink.finish(config.output_path)

    return RunResult(
        output_path=config.output_path,
        file_count=file_count,
        line_count=line_count,
        dropped_lines=dropped,
        page_count=sink.page_count,
    )


def main(argv: list[str] | None = None, sink_factory: Callable[[], RenderSink] = _default_sink) -> int:
    console = Console()
    err_console = Console(stderr=True)
    try:
        config, verbose = parse_args(argv)
    except CodePrintError as e:
        err_console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}", soft_wrap=True)
        return 1
    configure_logging(verbose)

    try:
        result = run(config, sink_factory=sink_factory)
    except CodePrintError as e:
        logger.debug("Run aborted", exc_info=True)
        err_console.print(f"[red]Failed to generate PDF:[/red] {escape(str(e))}", soft_wrap=True)
        return 1

    if result.dropped_lines:
        logger.info("Dropped %d lines from the middle of %s", result.dropped_lines, config.input_path)
    message = f"PDF generated: {escape(str(result.output_path))}"
    if config.input_path.is_dir():
        message += f" ({result.file_count} code files)"
    console.print(message, soft_wrap=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
