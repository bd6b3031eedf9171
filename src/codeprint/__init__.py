"""Render source code into paginated, line-numbered PDF documents."""

__version__ = "0.1.0"
