"""Symbol definitions with emoji/ASCII fallbacks.

Usage:
    symbols = SymbolsFormatter()
    print(symbols.Check)  # Returns "✅" or "+"
"""

import platform
import sys
from dataclasses import dataclass
from functools import cached_property


@dataclass(frozen=True)
class Symbol:
    """A symbol with emoji and ASCII fallback."""

    emoji: str
    ascii: str


class Symbols:
    """Symbol definitions as class attributes."""

    # Status indicators
    Check = Symbol("✅", "+")
    Cross = Symbol("❌", "x")
    Warning = Symbol("⚠️", "!")
    Info = Symbol("ℹ️", "i")
    Play = Symbol("▶️", ">")

    # Objects
    Clipboard = Symbol("📋", ">")
    Save = Symbol("💾", ">")
    Book = Symbol("📚", ">")


class SymbolsFormatter:
    """Provides symbols with automatic emoji/ASCII fallback based on terminal support.

    Emoji is disabled when no_color=True or when the terminal doesn't support it.
    """

    def __init__(self, no_color: bool = False):
        self._no_color = no_color

    @cached_property
    def supports_emoji(self) -> bool:
        """Detect if terminal supports emoji display."""
        if self._no_color:
            return False

        if platform.system() == "Windows":
            return False

        if not hasattr(sys.stdout, 'encoding') or sys.stdout.encoding is None:
            return False

        encoding = sys.stdout.encoding.lower()
        emoji_encodings = ['utf-8', 'utf8', 'utf-16', 'utf16']

        return any(enc in encoding for enc in emoji_encodings)

    def get(self, symbol: Symbol) -> str:
        """Resolve a symbol to emoji or ASCII based on support."""
        return symbol.emoji if self.supports_emoji else symbol.ascii

    @property
    def Check(self) -> str:
        return self.get(Symbols.Check)

    @property
    def Cross(self) -> str:
        return self.get(Symbols.Cross)

    @property
    def Warning(self) -> str:
        return self.get(Symbols.Warning)

    @property
    def Info(self) -> str:
        return self.get(Symbols.Info)

    @property
    def Play(self) -> str:
        return self.get(Symbols.Play)

    @property
    def Clipboard(self) -> str:
        return self.get(Symbols.Clipboard)

    @property
    def Save(self) -> str:
        return self.get(Symbols.Save)

    @property
    def Book(self) -> str:
        return self.get(Symbols.Book)
