"""Unit tests for codeprint data models."""

from codeprint.models import Chunk, LayoutConfig, Page, Row


def test_layout_config_defaults():
    config = LayoutConfig()

    assert config.lines_per_page == 50
    assert config.total_pages == 60
    assert config.page_capacity_lines == 3000
    assert config.page_height == 277.0
    assert config.line_height == 5.0


def test_layout_config_dict_round_trip():
    config = LayoutConfig(lines_per_page=40, total_pages=10, page_height=250.0, line_height=4.5)

    assert LayoutConfig.from_dict(config.to_dict()) == config


def test_layout_config_from_partial_dict_uses_defaults():
    config = LayoutConfig.from_dict({"lines_per_page": 30, "unknown": "ignored"})

    assert config.lines_per_page == 30
    assert config.total_pages == 60


def test_chunk_content_joins_lines():
    chunk = Chunk(start_line=3, end_line=5, lines=("a", "", "c"))

    assert chunk.content == "a\n\nc"
    assert len(chunk) == 3


def test_page_length_counts_rows():
    page = Page(rows=(Row(1, "x"), Row(2, "y")), break_before=True)

    assert len(page) == 2
    assert page.rows[1].number == 2
