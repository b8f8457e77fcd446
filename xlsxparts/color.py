"""Spreadsheet colours: RGB, indexed palette entries and theme references."""

from __future__ import annotations

import string
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Optional, Tuple, Union

ThemeRef = Tuple[str, str]
ColorValue = Union["Argb", int, ThemeRef, None]


@dataclass(frozen=True)
class Argb:
    """An opaque-or-translucent colour given as four 8-bit channels."""

    alpha: int
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("alpha", "red", "green", "blue"):
            channel = getattr(self, name)
            if isinstance(channel, bool) or not isinstance(channel, int):
                raise TypeError(f"{name} must be an int, not {type(channel).__name__}")
            if not 0 <= channel <= 255:
                raise ValueError(f"{name} must lie in 0..255, got {channel}")


def _hex_byte(text: str) -> int:
    """Parse a two-digit hex string, yielding 0 where it is not hex."""
    if text and all(ch in string.hexdigits for ch in text):
        return int(text, 16)
    return 0


def _to_int(text: Optional[str]) -> int:
    try:
        return int(text or "")
    except ValueError:
        return 0


def from_argb_string(text: str) -> Argb:
    """Parse ``AARRGGBB`` (or ``RRGGBB`` with zero alpha) into an :class:`Argb`.

    Any other length gives a colour with every channel zero.
    """
    if len(text) == 8:
        digits = text
    elif len(text) == 6:
        digits = "00" + text
    else:
        digits = "00000000"
    alpha, red, green, blue = (_hex_byte(digits[i:i + 2]) for i in range(0, 8, 2))
    return Argb(alpha, red, green, blue)


def to_argb_string(color: Argb) -> str:
    """Format a colour as upper-case ``AARRGGBB``."""
    return f"{color.alpha:02X}{color.red:02X}{color.green:02X}{color.blue:02X}"


@dataclass(frozen=True)
class XlsxColor:
    """A colour as stored in a workbook.

    ``value`` is an :class:`Argb`, an indexed palette number, a
    ``(theme, tint)`` pair of strings, or ``None`` for an unset colour.
    """

    value: ColorValue = None

    def __post_init__(self) -> None:
        value = self.value
        if isinstance(value, list):
            value = tuple(value)
            object.__setattr__(self, "value", value)
        if value is None or isinstance(value, Argb):
            return
        if isinstance(value, int) and not isinstance(value, bool):
            return
        if (
            isinstance(value, tuple)
            and len(value) == 2
            and all(isinstance(part, str) for part in value)
        ):
            return
        raise TypeError(f"unsupported colour value: {value!r}")

    def is_rgb_color(self) -> bool:
        return isinstance(self.value, Argb)

    def is_indexed_color(self) -> bool:
        return isinstance(self.value, int) and not isinstance(self.value, bool)

    def is_theme_color(self) -> bool:
        return isinstance(self.value, tuple)

    def is_invalid(self) -> bool:
        return self.value is None

    @property
    def rgb_color(self) -> Optional[Argb]:
        """The RGB value, or ``None`` when the colour is not an RGB colour."""
        return self.value if self.is_rgb_color() else None

    @property
    def indexed_color(self) -> int:
        """The palette index, or -1 when the colour is not indexed."""
        return self.value if self.is_indexed_color() else -1

    @property
    def theme_color(self) -> ThemeRef | Tuple[()]:
        """The ``(theme, tint)`` pair, or an empty tuple."""
        return self.value if self.is_theme_color() else ()

    def to_element(self, node: str = "") -> ET.Element:
        """Build the colour element; ``node`` names it, ``color`` by default."""
        element = ET.Element(node or "color")
        if self.is_rgb_color():
            element.set("rgb", to_argb_string(self.value))
        elif self.is_theme_color():
            theme, tint = self.value
            element.set("theme", theme)
            if tint:
                element.set("tint", tint)
        elif self.is_indexed_color():
            element.set("indexed", str(self.value))
        else:
            element.set("auto", "1")
        return element

    @classmethod
    def from_element(cls, element: ET.Element) -> "XlsxColor":
        """Read a colour from the attributes of a colour element."""
        if "rgb" in element.attrib:
            return cls(from_argb_string(element.get("rgb", "")))
        if "indexed" in element.attrib:
            return cls(_to_int(element.get("indexed")))
        if "theme" in element.attrib:
            return cls((element.get("theme", ""), element.get("tint", "")))
        return cls()