"""String-level ICAN entry points.

Each function normalises its input, looks up the specification by the
leading two-letter code and delegates to ican.spec.engine.

``only_crypto`` accepts False/None (no filter), True (any crypto
variant), a CryptoVariant, or one of "main", "mainnet", "test",
"testnet", "enter", "enterprise". An unrecognised value is a call-site
bug and raises ValueError.
"""

from __future__ import annotations

from ican.config import DEFAULT_FORMAT_CONFIG
from ican.core.errors import (
    CryptoVariantMismatch,
    IcanError,
    InvalidLocalPayload,
    RegistryMiss,
    StructureMismatch,
)
from ican.core.result import Err, Ok
from ican.core.types import CryptoVariant
from ican.formatting import electronic_format
from ican.registry import get_specification
from ican.spec import engine

type CryptoFilter = CryptoVariant | bool | str | None


def _crypto_filter(only_crypto: CryptoFilter) -> CryptoVariant:
    match CryptoVariant.parse(only_crypto):
        case Ok(variant):
            return variant
        case Err(reason):
            raise ValueError(reason)


def _not_a_string(value: object, source: str) -> Err[RegistryMiss]:
    return Err(RegistryMiss(
        message=f"Expected a string, got {type(value).__name__}",
        code="REGISTRY_MISS",
        source=source,
        country_code="",
    ))


def validate(ican: object, only_crypto: CryptoFilter = False) -> Ok[str] | Err[IcanError]:
    """Validate an ICAN, returning its electronic format or the first failure."""
    crypto = _crypto_filter(only_crypto)
    if not isinstance(ican, str):
        return _not_a_string(ican, "api.validate")
    text = electronic_format(ican)
    return get_specification(text[:2]).and_then(
        lambda spec: engine.validate(spec, text, crypto),
    )


def is_valid(ican: object, only_crypto: CryptoFilter = False) -> bool:
    """True if ``ican`` is a valid ICAN.

    >>> is_valid("DE89370400440532013000")
    True
    >>> is_valid("CB661234567890ABCDEF1234567890ABCDEF12345678", "main")
    True
    >>> is_valid("DE89370400440532013000", "main")
    False
    """
    return isinstance(validate(ican, only_crypto), Ok)


def to_bcan(
    ican: str,
    separator: str = DEFAULT_FORMAT_CONFIG.bcan_separator,
) -> Ok[str] | Err[RegistryMiss | StructureMismatch]:
    """BCAN of an ICAN with structure groups joined by ``separator``.

    >>> to_bcan("DE89370400440532013000").unwrap()
    '37040044 0532013000'
    """
    text = electronic_format(ican)
    return get_specification(text[:2]).and_then(
        lambda spec: engine.to_bcan(spec, text, separator),
    )


def from_bcan(country_code: str, bcan: str) -> Ok[str] | Err[RegistryMiss | InvalidLocalPayload]:
    """ICAN built from a country code and BCAN, with computed check digits.

    >>> from_bcan("DE", "370400440532013000").unwrap()
    'DE89370400440532013000'
    """
    return get_specification(country_code).and_then(
        lambda spec: engine.from_bcan(spec, bcan),
    )


def validate_bcan(
    country_code: str,
    bcan: str,
    only_crypto: CryptoFilter = False,
) -> Ok[str] | Err[RegistryMiss | InvalidLocalPayload | CryptoVariantMismatch]:
    crypto = _crypto_filter(only_crypto)
    return get_specification(country_code).and_then(
        lambda spec: engine.validate_bcan(spec, bcan, crypto),
    )


def is_valid_bcan(country_code: str, bcan: str, only_crypto: CryptoFilter = False) -> bool:
    """True if ``bcan`` fits the country's layout (no checksum is involved)."""
    return isinstance(validate_bcan(country_code, bcan, only_crypto), Ok)
