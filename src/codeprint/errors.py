"""Error types raised by codeprint. Every one of them ends the current run."""


class CodePrintError(Exception):
    """Base class for all codeprint failures."""


class FileAccessError(CodePrintError):
    """An input path is missing or unreadable, or an output location cannot be created."""


class InvalidConfig(CodePrintError):
    """Layout parameters that cannot produce a page plan."""


class RenderError(CodePrintError):
    """The drawing backend failed to draw or write the document."""
