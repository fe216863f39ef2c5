"""Formatting helpers: electronic, print and short forms of an ICAN.

These operate on plain strings and know nothing about the registry.
"""

from __future__ import annotations

import re

from ican.config import DEFAULT_FORMAT_CONFIG
from ican.core.errors import InvalidFormatArguments
from ican.core.result import Err, Ok

_NON_ALPHANUM = re.compile(r"[^A-Za-z0-9]")


def electronic_format(text: str) -> str:
    """Strip everything outside [A-Za-z0-9] and uppercase the rest."""
    return _NON_ALPHANUM.sub("", text).upper()


def print_format(
    ican: str,
    separator: str = DEFAULT_FORMAT_CONFIG.print_separator,
    group_size: int = DEFAULT_FORMAT_CONFIG.print_group_size,
) -> str:
    """Electronic form with ``separator`` after every ``group_size`` characters.

    >>> print_format("DE89370400440532013000")
    'DE89 3704 0044 0532 0130 00'
    """
    text = electronic_format(ican)
    return separator.join(text[i:i + group_size] for i in range(0, len(text), group_size))


def short_format(
    ican: str,
    separator: str = DEFAULT_FORMAT_CONFIG.short_separator,
    front_count: int = DEFAULT_FORMAT_CONFIG.short_front_count,
    back_count: int = DEFAULT_FORMAT_CONFIG.short_back_count,
) -> Ok[str] | Err[InvalidFormatArguments]:
    """First ``front_count`` and last ``back_count`` characters around ``separator``.

    >>> short_format("DE89370400440532013000").unwrap()
    'DE89…3000'
    """
    text = electronic_format(ican)
    if front_count < 0 or back_count < 0 or front_count + back_count > len(text):
        return Err(InvalidFormatArguments(
            message=f"invalid front_count {front_count} or back_count {back_count} "
                    f"for length {len(text)}",
            code="INVALID_FORMAT_ARGUMENTS",
            source="formatting.short_format",
            front_count=front_count,
            back_count=back_count,
            length=len(text),
        ))
    # slice from an explicit start: text[-0:] would be the whole string
    return Ok(text[:front_count] + separator + text[len(text) - back_count:])
