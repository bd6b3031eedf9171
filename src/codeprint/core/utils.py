import logging
import os
from pathlib import Path

from codeprint.constants import CODE_EXTENSIONS, SOURCE_ENCODINGS, TAB_REPLACEMENT
from codeprint.errors import FileAccessError

logger = logging.getLogger(__name__)

# Control characters that would show up as boxes in the PDF. Newline, carriage
# return and space are kept.
_CONTROL_TO_SPACE = {
    code: " " for code in (*range(32), 127, *range(128, 160)) if code not in (ord("\n"), ord("\r"), ord(" "))
}


def read_file_contents(file_path: str | Path) -> str:
    """Reads file content, trying common encodings."""
    for encoding in SOURCE_ENCODINGS:
        try:
            with open(file_path, encoding=encoding) as f:
                return f.read()
        except UnicodeDecodeError:
            continue  # Try next encoding
        except OSError as e:
            raise FileAccessError(f"Failed to read file {file_path}: {e}") from e
    # latin-1 accepts every byte, so this is only reached with a custom encoding list
    raise FileAccessError(f"Could not decode file {file_path} with tried encodings: {', '.join(SOURCE_ENCODINGS)}.")


def normalize_text(text: str) -> str:
    """
    Prepares raw source text for layout:
    - Windows and old Mac line endings become "\\n"
    - tabs are expanded to four spaces
    - other control characters become a plain space
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = text.replace("\t", TAB_REPLACEMENT)
    return text.translate(_CONTROL_TO_SPACE)


def read_lines(file_path: str | Path) -> list[str]:
    """Reads a file and returns its normalized lines. A trailing newline yields a final empty line."""
    lines = normalize_text(read_file_contents(file_path)).split("\n")
    logger.debug("Read %d lines from %s", len(lines), file_path)
    return lines


def is_code_file(file_name: str | Path) -> bool:
    """True when the file extension is on the code allow-list (case-sensitive)."""
    return Path(file_name).suffix in CODE_EXTENSIONS


def _raise_walk_error(error: OSError) -> None:
    raise FileAccessError(f"Failed to walk directory: {error}") from error


def collect_code_files(root: str | Path) -> list[Path]:
    """Recursively collects recognized code files under root, sorted by full path."""
    code_files = []
    for dir_path, _dir_names, file_names in os.walk(root, onerror=_raise_walk_error):
        for name in file_names:
            if is_code_file(name):
                code_files.append(os.path.join(dir_path, name))
            else:
                logger.debug("Skipping non-code file %s", os.path.join(dir_path, name))
    code_files.sort()
    return [Path(p) for p in code_files]


def ensure_parent_dir(output_path: str | Path) -> None:
    """Creates the directory that will hold output_path if it does not exist yet."""
    parent = Path(output_path).parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileAccessError(f"Failed to create output directory {parent}: {e}") from e


def display_path(path: str | Path) -> str:
    """Shortens a path for display using '~' for the home directory."""
    try:
        p = Path(path).expanduser().resolve()
        home = Path.home().resolve()
        if p.is_relative_to(home):
            return f"~/{p.relative_to(home)}"
        return str(p)
    except (OSError, RuntimeError):
        logger.warning("display_path failed for %s", path)
        return str(path)
