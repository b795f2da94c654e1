"""RGBA pixel values and their ``#rrggbb`` / ``#rrggbb.aa`` string form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

_INVALID = "invalid pixel string"
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


@dataclass(frozen=True)
class Pixel:
    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for value in (self.red, self.green, self.blue, self.alpha):
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f'expected unsigned byte, got "{value}"')

    @classmethod
    def rgb(cls, red: int, green: int, blue: int) -> "Pixel":
        return cls(red, green, blue)

    @classmethod
    def rgba(cls, red: int, green: int, blue: int, alpha: int) -> "Pixel":
        return cls(red, green, blue, alpha)

    @classmethod
    def parse(cls, text: str) -> "Pixel":
        """Parse ``#rrggbb`` or ``#rrggbb.aa``; the alpha defaults to 255."""

        if len(text) not in (7, 10) or not text.startswith("#"):
            raise ValueError(_INVALID)
        if len(text) == 10 and text[7] != ".":
            raise ValueError(_INVALID)

        digits = [text[1:3], text[3:5], text[5:7]]
        if len(text) == 10:
            digits.append(text[8:10])
        if any(ch not in _HEX_DIGITS for pair in digits for ch in pair):
            raise ValueError(_INVALID)
        return cls(*(int(pair, 16) for pair in digits))

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return self.red, self.green, self.blue, self.alpha

    def __str__(self) -> str:
        base = f"#{self.red:02x}{self.green:02x}{self.blue:02x}"
        if self.alpha == 255:
            return base
        return f"{base}.{self.alpha:02x}"


BLACK = Pixel(0, 0, 0)
WHITE = Pixel(255, 255, 255)


__all__ = ["Pixel", "BLACK", "WHITE"]
