"""Hypothesis strategies and pytest fixtures for ican.

Strategies generate registry codes, BCANs that fit a specification's
structure, and the accepted spellings of a crypto filter.
"""

from __future__ import annotations

import string

import pytest
from hypothesis import HealthCheck, settings
from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from ican.core.types import CryptoVariant
from ican.registry import specifications
from ican.spec.specification import Specification
from ican.spec.structure import CharClass

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=500,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=100,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ===================================================================
# PRIMITIVE STRATEGIES
# ===================================================================

# Characters that survive electronic_format unchanged (no lowercase).
_GENERATED_ALPHABET: dict[CharClass, str] = {
    CharClass.A: string.digits + string.ascii_uppercase,
    CharClass.B: string.digits + string.ascii_uppercase,
    CharClass.C: string.ascii_uppercase,
    CharClass.H: string.digits + "ABCDEF",
    CharClass.F: string.digits,
    CharClass.L: string.ascii_lowercase,
    CharClass.U: string.ascii_uppercase,
    CharClass.W: string.digits + string.ascii_lowercase,
}


def digit_strings(min_size: int = 1, max_size: int = 80) -> SearchStrategy[str]:
    return st.text(alphabet=string.digits, min_size=min_size, max_size=max_size)


def registry_specs() -> SearchStrategy[Specification]:
    return st.sampled_from(specifications())


def crypto_inputs() -> SearchStrategy[object]:
    """Every accepted spelling of a crypto filter."""
    return st.sampled_from([
        None, False, True, *CryptoVariant,
        "none", "any", "main", "mainnet", "test", "testnet", "enter", "enterprise",
        "MAINNET", " Test ",
    ])


# ===================================================================
# DOMAIN STRATEGIES
# ===================================================================


@st.composite
def bcans_for(draw: st.DrawFn, spec: Specification) -> str:
    """A BCAN in electronic format that fits spec's structure."""
    return "".join(
        draw(st.text(
            alphabet=_GENERATED_ALPHABET[seg.char_class],
            min_size=seg.width,
            max_size=seg.width,
        ))
        for seg in spec.matcher.segments
    )


@st.composite
def specs_with_bcans(draw: st.DrawFn) -> tuple[Specification, str]:
    spec = draw(registry_specs())
    return spec, draw(bcans_for(spec))


# ===================================================================
# FIXTURES
# ===================================================================


@pytest.fixture(params=specifications(), ids=lambda s: s.code)
def registry_spec(request: pytest.FixtureRequest) -> Specification:
    """Parametrises a test over every registry entry."""
    return request.param  # type: ignore[no-any-return]
