"""Line source: reading, normalization and directory collection."""

import os

import pytest

from codeprint.core.utils import (
    collect_code_files,
    ensure_parent_dir,
    is_code_file,
    normalize_text,
    read_file_contents,
    read_lines,
)
from codeprint.errors import FileAccessError


def test_normalize_line_endings_tabs_and_control_characters():
    raw = "a\r\nb\rc\n\tindent\x00x\x1by\x7fz\x85w"
    assert normalize_text(raw) == "a\nb\nc\n    indent x y z w"


def test_normalize_keeps_printable_unicode():
    assert normalize_text("naïve — 中文 ✓") == "naïve — 中文 ✓"


def test_read_lines_splits_on_newlines(tmp_path):
    source = tmp_path / "main.go"
    source.write_bytes(b"package main\r\n\r\nfunc main() {\r\n\tprintln()\r\n}\r\n")

    # The trailing newline leaves a final empty line.
    assert read_lines(source) == ["package main", "", "func main() {", "    println()", "}", ""]


def test_read_lines_falls_back_to_latin1(tmp_path):
    source = tmp_path / "legacy.c"
    source.write_bytes("/* caf\xe9 */".encode("latin-1"))

    assert read_file_contents(source) == "/* café */"
    assert read_lines(source) == ["/* café */"]


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileAccessError):
        read_lines(tmp_path / "missing.py")


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("main.go", True),
        ("App.java", True),
        ("script.py", True),
        ("index.html", True),
        ("lib.h", True),
        ("Program.cs", True),
        ("README.md", False),
        ("notes.txt", False),
        ("Makefile", False),
        ("upper.PY", False),
        ("component.tsx", False),
    ],
)
def test_is_code_file(name, expected):
    assert is_code_file(name) is expected


def test_collect_code_files_filters_and_sorts(tmp_path):
    (tmp_path / "pkg" / "sub").mkdir(parents=True)
    (tmp_path / "b.py").write_text("b")
    (tmp_path / "a.go").write_text("a")
    (tmp_path / "pkg" / "z.js").write_text("z")
    (tmp_path / "pkg" / "sub" / "m.c").write_text("m")
    (tmp_path / "pkg" / "notes.md").write_text("skip")
    (tmp_path / "image.png").write_bytes(b"\x89PNG")

    files = collect_code_files(tmp_path)

    assert [p.relative_to(tmp_path).as_posix() for p in files] == ["a.go", "b.py", "pkg/sub/m.c", "pkg/z.js"]


def test_collect_code_files_reports_walk_errors(tmp_path):
    with pytest.raises(FileAccessError):
        collect_code_files(tmp_path / "does-not-exist")


def test_ensure_parent_dir_creates_nested_directories(tmp_path):
    target = tmp_path / "out" / "nested" / "doc.pdf"
    ensure_parent_dir(target)
    assert target.parent.is_dir()


def test_ensure_parent_dir_fails_when_parent_is_a_file(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    with pytest.raises(FileAccessError):
        ensure_parent_dir(blocker / "doc.pdf")


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_collect_includes_dangling_code_links(tmp_path):
    os.symlink(tmp_path / "gone.py", tmp_path / "broken.py")
    files = collect_code_files(tmp_path)
    assert [p.name for p in files] == ["broken.py"]
    with pytest.raises(FileAccessError):
        read_lines(files[0])
