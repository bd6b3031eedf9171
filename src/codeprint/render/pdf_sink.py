"""PDF render target built on QPdfWriter / QPainter."""

import logging
import os
from pathlib import Path
from typing import NamedTuple, Optional

from PyQt5.QtCore import QLineF, QMarginsF, QRectF, Qt
from PyQt5.QtGui import (
    QColor,
    QFont,
    QFontMetricsF,
    QGuiApplication,
    QImage,
    QPageLayout,
    QPageSize,
    QPainter,
    QPdfWriter,
    QPen,
)

from codeprint.constants import (
    AUTO_BREAK_MARGIN_MM,
    BLOCK_GAP_AFTER_MM,
    BLOCK_GAP_BEFORE_MM,
    BLOCK_RULE_LEFT_MM,
    BLOCK_RULE_RIGHT_MM,
    BLOCK_RULE_WIDTH_MM,
    CODE_FONT_FAMILY,
    CODE_FONT_SIZE_PT,
    CONTENT_WIDTH_MM,
    DEFAULT_FOOTER,
    FOOTER_CELL_HEIGHT_MM,
    FOOTER_FONT_SIZE_PT,
    FOOTER_Y_MM,
    HEADER_CELL_HEIGHT_MM,
    HEADER_FONT_SIZE_PT,
    HEADER_RULE_GAP_MM,
    HEADER_RULE_WIDTH_MM,
    HEADER_Y_MM,
    LEFT_MARGIN_MM,
    LINE_NUMBER_COLOR,
    LINE_NUMBER_WIDTH_MM,
    PAGE_HEIGHT_MM,
    PDF_RESOLUTION_DPI,
    ROW_HEIGHT_MM,
    SPACER_WIDTH_MM,
    TEXT_COLOR,
)
from codeprint.core.wrapping import wrap_text
from codeprint.errors import RenderError

logger = logging.getLogger(__name__)

MM_PER_INCH = 25.4


_APP: Optional[QGuiApplication] = None


def ensure_gui_application() -> QGuiApplication:
    """Fonts and painting need a QGuiApplication. The tool runs headless."""
    global _APP
    app = QGuiApplication.instance()
    if app is None:
        os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
        # Kept at module level so the application outlives the caller.
        _APP = app = QGuiApplication(["codeprint"])
    return app


# --- Recorded drawing operations (coordinates in mm) ---
class _TextOp(NamedTuple):
    rect: tuple[float, float, float, float]
    text: str
    font: str
    color: tuple[int, int, int]
    align: int


class _RuleOp(NamedTuple):
    x1: float
    x2: float
    y: float
    width: float


class PdfRenderSink:
    """
    Draws code rows on A4 pages.

    Pages are recorded as display lists and only painted in finish(), once the
    total page count is known for the "Page N of M" footer.
    """

    def __init__(self, code_font_family: str = CODE_FONT_FAMILY, resolution: int = PDF_RESOLUTION_DPI):
        ensure_gui_application()
        self.resolution = resolution
        self._px_per_mm = resolution / MM_PER_INCH
        self._fonts = {
            "code": self._make_font(code_font_family, CODE_FONT_SIZE_PT, monospace=True),
            "header": self._make_font(code_font_family, HEADER_FONT_SIZE_PT),
            "footer": self._make_font(code_font_family, FOOTER_FONT_SIZE_PT),
        }
        # Metrics are taken against an image with the PDF's resolution so they match the output.
        self._metrics_device = QImage(1, 1, QImage.Format_RGB32)
        dots_per_meter = round(resolution / MM_PER_INCH * 1000)
        self._metrics_device.setDotsPerMeterX(dots_per_meter)
        self._metrics_device.setDotsPerMeterY(dots_per_meter)
        self._code_metrics = QFontMetricsF(self._fonts["code"], self._metrics_device)
        self._advance_cache: dict[str, float] = {}

        self._header: Optional[str] = None
        self._footer = DEFAULT_FOOTER
        self._pages: list[list] = []
        self._y = 0.0

    @staticmethod
    def _make_font(family: str, size_pt: float, monospace: bool = False) -> QFont:
        font = QFont(family)
        font.setPointSizeF(size_pt)
        if monospace:
            font.setStyleHint(QFont.Monospace)
            font.setFixedPitch(True)
        return font

    @property
    def page_count(self) -> int:
        return len(self._pages)

    # --- RenderSink interface ---
    def begin_document(self, header: str, footer: str = DEFAULT_FOOTER) -> None:
        self._header = header
        self._footer = footer
        self._pages = []
        self.add_page()

    def add_page(self) -> None:
        if self._header is None:
            raise RenderError("begin_document() must be called before adding pages")
        self._pages.append([])
        self._y = HEADER_Y_MM
        self._text((LEFT_MARGIN_MM, self._y, CONTENT_WIDTH_MM, HEADER_CELL_HEIGHT_MM), self._header, "header")
        self._y += HEADER_CELL_HEIGHT_MM
        self._rule(LEFT_MARGIN_MM, LEFT_MARGIN_MM + CONTENT_WIDTH_MM, HEADER_RULE_WIDTH_MM)
        self._y += HEADER_RULE_GAP_MM

    def draw_row(self, line_number: int, text: str) -> None:
        if not self._pages:
            raise RenderError("draw_row() called with no open page")
        text_x = LEFT_MARGIN_MM + LINE_NUMBER_WIDTH_MM + SPACER_WIDTH_MM
        text_width = CONTENT_WIDTH_MM - LINE_NUMBER_WIDTH_MM - SPACER_WIDTH_MM
        for index, segment in enumerate(wrap_text(text, text_width, self._advance_mm)):
            if self._y + ROW_HEIGHT_MM > PAGE_HEIGHT_MM - AUTO_BREAK_MARGIN_MM:
                self.add_page()
            if index == 0:
                self._text(
                    (LEFT_MARGIN_MM, self._y, LINE_NUMBER_WIDTH_MM, ROW_HEIGHT_MM),
                    f"{line_number:4d}",
                    "code",
                    LINE_NUMBER_COLOR,
                    Qt.AlignRight | Qt.AlignVCenter,
                )
            self._text((text_x, self._y, text_width, ROW_HEIGHT_MM), segment, "code")
            self._y += ROW_HEIGHT_MM

    def finish_block(self) -> None:
        if not self._pages:
            raise RenderError("finish_block() called with no open page")
        self._y += BLOCK_GAP_BEFORE_MM
        self._rule(BLOCK_RULE_LEFT_MM, BLOCK_RULE_RIGHT_MM, BLOCK_RULE_WIDTH_MM)
        self._y += BLOCK_GAP_AFTER_MM

    def current_vertical_position(self) -> float:
        return self._y

    def finish(self, output_path: str | Path) -> None:
        if not self._pages:
            raise RenderError("Nothing to write: begin_document() was never called")
        writer = QPdfWriter(str(output_path))
        writer.setResolution(self.resolution)
        writer.setPageLayout(
            QPageLayout(QPageSize(QPageSize.A4), QPageLayout.Portrait, QMarginsF(0, 0, 0, 0), QPageLayout.Millimeter)
        )
        writer.setTitle(self._header or "")
        writer.setCreator("codeprint")

        painter = QPainter()
        if not painter.begin(writer):
            raise RenderError(f"Could not open {output_path} for writing")
        total = len(self._pages)
        try:
            for number, ops in enumerate(self._pages, start=1):
                if number > 1 and not writer.newPage():
                    raise RenderError(f"Could not start page {number} in {output_path}")
                for op in ops:
                    self._paint(painter, op)
                self._paint(
                    painter,
                    _TextOp(
                        (LEFT_MARGIN_MM, FOOTER_Y_MM, CONTENT_WIDTH_MM, FOOTER_CELL_HEIGHT_MM),
                        self.footer_text(number),
                        "footer",
                        TEXT_COLOR,
                        Qt.AlignHCenter | Qt.AlignVCenter,
                    ),
                )
        finally:
            painter.end()
        logger.info("Wrote %d pages to %s", total, output_path)

    def footer_text(self, page: int) -> str:
        """Footer for a 1-based page number, filled in with the current page total."""
        return self._footer.format(page=page, pages=len(self._pages))

    # --- helpers ---
    def _advance_mm(self, ch: str) -> float:
        width = self._advance_cache.get(ch)
        if width is None:
            width = self._code_metrics.horizontalAdvance(ch) / self._px_per_mm
            self._advance_cache[ch] = width
        return width

    def _text(self, rect, text: str, font: str, color=TEXT_COLOR, align=Qt.AlignLeft | Qt.AlignVCenter) -> None:
        self._pages[-1].append(_TextOp(rect, text, font, color, int(align)))

    def _rule(self, x1: float, x2: float, width: float) -> None:
        self._pages[-1].append(_RuleOp(x1, x2, self._y, width))

    def _paint(self, painter: QPainter, op) -> None:
        px = self._px_per_mm
        if isinstance(op, _RuleOp):
            painter.setPen(QPen(QColor(*TEXT_COLOR), op.width * px))
            painter.drawLine(QLineF(op.x1 * px, op.y * px, op.x2 * px, op.y * px))
            return
        x, y, w, h = op.rect
        painter.setFont(self._fonts[op.font])
        painter.setPen(QColor(*op.color))
        painter.drawText(QRectF(x * px, y * px, w * px, h * px), op.align, op.text)
