"""Tests for ican.spec.structure: pattern compilation and matching."""

from __future__ import annotations

import dataclasses
import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ican.core.errors import InvalidStructure
from ican.core.result import Err, Ok, unwrap
from ican.spec.structure import CharClass, Segment, StructureMatcher, compile_structure


class TestCharClass:
    @pytest.mark.parametrize(("tag", "inside", "outside"), [
        ("A", "0aZ", "-_ "),
        ("B", "0Z", "a-"),
        ("C", "aZ", "0-"),
        ("H", "09afAF", "gG-"),
        ("F", "09", "aA"),
        ("L", "az", "A0"),
        ("U", "AZ", "a0"),
        ("W", "0az", "A-"),
    ])
    def test_membership(self, tag: str, inside: str, outside: str) -> None:
        cls = CharClass(tag)
        assert all(c in cls for c in inside)
        assert not any(c in cls for c in outside)

    def test_allowed_is_ascii(self) -> None:
        printable = set(string.ascii_letters + string.digits)
        for cls in CharClass:
            assert cls.allowed <= printable


class TestCompile:
    def test_single_triple(self) -> None:
        matcher = unwrap(compile_structure("F21"))
        assert matcher.segments == (Segment(CharClass.F, 21),)
        assert matcher.width == 21

    def test_preserves_order(self) -> None:
        matcher = unwrap(compile_structure("U04F06F08"))
        assert [s.char_class for s in matcher.segments] == [CharClass.U, CharClass.F, CharClass.F]
        assert [s.width for s in matcher.segments] == [4, 6, 8]
        assert matcher.width == 18

    def test_pattern_round_trip(self) -> None:
        assert unwrap(compile_structure("F05F05A11F02")).pattern == "F05F05A11F02"

    def test_zero_width_segment_allowed(self) -> None:
        assert unwrap(compile_structure("F00U02")).width == 2

    @pytest.mark.parametrize("pattern", [
        "",          # empty
        "F0",        # not a multiple of 3
        "F081",      # trailing fragment
        "X08",       # unknown tag
        "f08",       # lowercase tag
        "F8A",       # non-digit width
        "F 8",       # space in width
        "F08Q10",    # unknown second tag
        "F٠٨",       # non-ASCII digits
    ])
    def test_malformed(self, pattern: str) -> None:
        result = compile_structure(pattern)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidStructure)
        assert result.error.structure == pattern

    def test_memoised(self) -> None:
        assert compile_structure("F08F10") is compile_structure("F08F10")

    def test_matcher_is_frozen(self) -> None:
        matcher = unwrap(compile_structure("F08F10"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            matcher.segments = ()  # type: ignore[misc]


class TestMatch:
    matcher: StructureMatcher = unwrap(compile_structure("U04F06F08"))

    def test_groups(self) -> None:
        assert self.matcher.match("NWBK60161331926819") == ("NWBK", "601613", "31926819")

    def test_too_short(self) -> None:
        assert self.matcher.match("NWBK6016133192681") is None

    def test_too_long(self) -> None:
        assert self.matcher.match("NWBK601613319268190") is None

    def test_wrong_class(self) -> None:
        assert self.matcher.match("NWB160161331926819") is None
        assert self.matcher.match("NWBK6016X331926819") is None

    def test_lowercase_rejected_for_upper_class(self) -> None:
        assert self.matcher.match("nwbk60161331926819") is None

    def test_empty(self) -> None:
        assert self.matcher.match("") is None

    def test_first_mismatch_position(self) -> None:
        assert self.matcher.first_mismatch("NWBK60161331926819") is None
        assert self.matcher.first_mismatch("NWB160161331926819") == 3
        assert self.matcher.first_mismatch("NWBK6016X331926819") == 8

    def test_first_mismatch_on_length(self) -> None:
        assert self.matcher.first_mismatch("NWBK") == 4
        assert self.matcher.first_mismatch("NWBK601613319268199") == 18

    def test_hex_accepts_both_cases(self) -> None:
        matcher = unwrap(compile_structure("H04"))
        assert matcher.match("aF09") == ("aF09",)
        assert matcher.match("aG09") is None

    @given(st.text(alphabet=string.digits, min_size=18, max_size=18))
    def test_digits_only_fit_numeric_structure(self, digits: str) -> None:
        matcher = unwrap(compile_structure("F08F10"))
        groups = matcher.match(digits)
        assert groups is not None
        assert "".join(groups) == digits

    @given(st.text(min_size=0, max_size=30))
    def test_match_never_raises(self, text: str) -> None:
        result = self.matcher.match(text)
        assert result is None or "".join(result) == text


class TestCompileResultType:
    def test_ok_variant(self) -> None:
        assert isinstance(compile_structure("A16"), Ok)
