"""Readers and writers for single SpreadsheetML parts: colours, content types, conditional formatting and charts."""

__version__ = "1.3.0"

__all__ = [
    "cellrange",
    "cfxml",
    "chart",
    "chartaxes",
    "chartread",
    "chartwrite",
    "color",
    "conditionalformatting",
    "contenttypes",
]