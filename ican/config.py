"""Formatting defaults for ICAN output.

No environment variables, no files. Pure configuration data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final


@final
@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Separators and counts used when no explicit argument is given."""

    print_separator: str = " "
    print_group_size: int = 4
    short_separator: str = "…"  # horizontal ellipsis
    short_front_count: int = 4
    short_back_count: int = 4
    bcan_separator: str = " "

    def __post_init__(self) -> None:
        if self.print_group_size <= 0:
            raise TypeError(f"print_group_size must be > 0, got {self.print_group_size}")
        if self.short_front_count < 0 or self.short_back_count < 0:
            raise TypeError("short_front_count and short_back_count must be >= 0")


DEFAULT_FORMAT_CONFIG = FormatConfig()
