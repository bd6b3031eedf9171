# ------------ layout defaults ------------ #
DEFAULT_LINES_PER_PAGE = 50
DEFAULT_TOTAL_PAGES = 60
DEFAULT_PAGE_HEIGHT = 297.0 - 20.0  # A4 height minus top/bottom margins (mm)
DEFAULT_LINE_HEIGHT = 5.0  # estimated height of one row (mm)

# ------------ CLI defaults ------------ #
DEFAULT_OUTPUT_PATH = "code_document.pdf"
DEFAULT_PROJECT_NAME = "Project Name"
DEFAULT_FOOTER = "Page {page} of {pages}"

# ------------ line source ------------ #
TAB_REPLACEMENT = "    "
SOURCE_ENCODINGS = ("utf-8", "latin-1", "windows-1252")
CODE_EXTENSIONS = (
    ".go",
    ".java",
    ".py",
    ".js",
    ".ts",
    ".html",
    ".css",
    ".cpp",
    ".c",
    ".h",
    ".cs",
    ".php",
)

# ------------ page geometry (mm, A4 portrait) ------------ #
PAGE_WIDTH_MM = 210.0
PAGE_HEIGHT_MM = 297.0
LEFT_MARGIN_MM = 10.0
CONTENT_WIDTH_MM = 190.0
AUTO_BREAK_MARGIN_MM = 10.0

HEADER_Y_MM = 5.0
HEADER_CELL_HEIGHT_MM = 8.0
HEADER_RULE_WIDTH_MM = 0.5
HEADER_RULE_GAP_MM = 3.0

FOOTER_Y_MM = PAGE_HEIGHT_MM - 12.0
FOOTER_CELL_HEIGHT_MM = 8.0

ROW_HEIGHT_MM = 5.0
LINE_NUMBER_WIDTH_MM = 15.0
SPACER_WIDTH_MM = 5.0

BLOCK_RULE_LEFT_MM = 20.0
BLOCK_RULE_RIGHT_MM = 190.0
BLOCK_RULE_WIDTH_MM = 0.2
BLOCK_GAP_BEFORE_MM = 0.5
BLOCK_GAP_AFTER_MM = 2.0

# ------------ fonts / colours ------------ #
CODE_FONT_FAMILY = "Courier New"
CODE_FONT_SIZE_PT = 8.0
HEADER_FONT_SIZE_PT = 10.0
FOOTER_FONT_SIZE_PT = 8.0
LINE_NUMBER_COLOR = (128, 128, 128)
TEXT_COLOR = (0, 0, 0)

PDF_RESOLUTION_DPI = 300
