"""Core types: CryptoVariant and its input normalisation.

Callers may pass a crypto filter as a bool, a textual token or an enum
member. CryptoVariant.parse maps all of them onto the enum before any
engine logic runs.
"""

from __future__ import annotations

from enum import Enum

from ican.core.result import Err, Ok


class CryptoVariant(Enum):
    """Crypto-asset network of a specification, or a filter over them.

    ANY is query-only: no concrete specification carries it.
    """

    NONE = "none"
    MAIN = "main"
    TEST = "test"
    ENTERPRISE = "enterprise"
    ANY = "any"

    @property
    def is_crypto(self) -> bool:
        return self is not CryptoVariant.NONE

    def admits(self, actual: CryptoVariant) -> bool:
        """True if a specification with variant ``actual`` passes this filter."""
        if self is CryptoVariant.NONE:
            return True
        if self is CryptoVariant.ANY:
            return actual.is_crypto
        return self is actual

    @staticmethod
    def parse(raw: object) -> Ok[CryptoVariant] | Err[str]:
        """Normalise a bool, None, enum member or textual synonym."""
        if raw is None or raw is False:
            return Ok(CryptoVariant.NONE)
        if raw is True:
            return Ok(CryptoVariant.ANY)
        if isinstance(raw, CryptoVariant):
            return Ok(raw)
        if isinstance(raw, str):
            variant = _SYNONYMS.get(raw.strip().lower())
            if variant is not None:
                return Ok(variant)
        return Err(f"Unknown crypto variant: {raw!r}")


_SYNONYMS: dict[str, CryptoVariant] = {
    "none": CryptoVariant.NONE,
    "any": CryptoVariant.ANY,
    "main": CryptoVariant.MAIN,
    "mainnet": CryptoVariant.MAIN,
    "test": CryptoVariant.TEST,
    "testnet": CryptoVariant.TEST,
    "enter": CryptoVariant.ENTERPRISE,
    "enterprise": CryptoVariant.ENTERPRISE,
}
