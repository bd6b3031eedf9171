"""In-memory render sink used by the layout and CLI tests."""

HEADER_END = 16.0


class RecordingSink:
    """Render sink that keeps rows per physical page and advances a fixed cursor per row."""

    def __init__(self, page_height: float = 287.0, row_height: float = 5.0, wrap_every: int = 0):
        self.page_height = page_height
        self.row_height = row_height
        self.wrap_every = wrap_every  # rows longer than this many chars take two physical lines
        self.header = None
        self.footer = None
        self.pages: list[list[tuple[int, str]]] = []
        self.blocks = 0
        self.finished_path = None
        self.y = 0.0

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def begin_document(self, header, footer):
        self.header = header
        self.footer = footer
        self.add_page()

    def add_page(self):
        self.pages.append([])
        self.y = HEADER_END

    def draw_row(self, line_number, text):
        height = self.row_height
        if self.wrap_every and len(text) > self.wrap_every:
            height *= 2
        if self.y + height > self.page_height:
            self.add_page()
        self.pages[-1].append((line_number, text))
        self.y += height

    def finish_block(self):
        self.blocks += 1
        self.y += 2.5

    def current_vertical_position(self):
        return self.y

    def finish(self, output_path):
        self.finished_path = output_path

    @property
    def rows(self) -> list[tuple[int, str]]:
        return [row for page in self.pages for row in page]

