"""Styled geometric forms, file paths, command-line options and SVG export for city maps."""

__version__ = "0.1.0"
__all__ = ["args", "dirpath", "form", "shapes", "style", "svg"]