"""Error value hierarchy: no validation function raises exceptions.

Every error is a frozen dataclass value that can be pattern-matched and
serialized. Base class IcanError, eight @final subclasses, one per
failure kind of the validation/conversion pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import final


@dataclass(frozen=True, slots=True)
class IcanError:
    """Base error value. NOT @final: has subclasses."""

    message: str
    code: str
    source: str  # "module.function" that produced this error

    def with_context(self, context: str) -> IcanError:
        """Return a copy with context prepended to message."""
        return replace(self, message=f"{context}: {self.message}")

    def to_dict(self) -> dict[str, object]:
        return {
            "message": self.message,
            "code": self.code,
            "source": self.source,
        }


@final
@dataclass(frozen=True, slots=True)
class RegistryMiss(IcanError):
    """Leading code is not a registry key, or is not two uppercase letters."""

    country_code: str

    def to_dict(self) -> dict[str, object]:
        return {**IcanError.to_dict(self), "country_code": self.country_code}


@final
@dataclass(frozen=True, slots=True)
class InvalidStructure(IcanError):
    """A structure pattern string is malformed."""

    structure: str

    def to_dict(self) -> dict[str, object]:
        return {**IcanError.to_dict(self), "structure": self.structure}


@final
@dataclass(frozen=True, slots=True)
class LengthMismatch(IcanError):
    """Identifier length differs from the specification's declared length."""

    expected: int
    actual: int

    def to_dict(self) -> dict[str, object]:
        return {**IcanError.to_dict(self), "expected": self.expected, "actual": self.actual}


@final
@dataclass(frozen=True, slots=True)
class CryptoVariantMismatch(IcanError):
    """Specification's crypto variant does not satisfy the requested filter."""

    required: str
    actual: str

    def to_dict(self) -> dict[str, object]:
        return {**IcanError.to_dict(self), "required": self.required, "actual": self.actual}


@final
@dataclass(frozen=True, slots=True)
class StructureMismatch(IcanError):
    """Text after the 4-character prefix does not fit the compiled structure."""

    value: str
    position: int  # offset of the first offending character within value

    def to_dict(self) -> dict[str, object]:
        return {**IcanError.to_dict(self), "value": self.value, "position": self.position}


@final
@dataclass(frozen=True, slots=True)
class ChecksumInvalid(IcanError):
    """MOD 97-10 remainder of the rearranged identifier is not 1."""

    remainder: int

    def to_dict(self) -> dict[str, object]:
        return {**IcanError.to_dict(self), "remainder": self.remainder}


@final
@dataclass(frozen=True, slots=True)
class InvalidLocalPayload(IcanError):
    """A bare BCAN fails the length or structure check."""

    bcan: str
    reason: str

    def to_dict(self) -> dict[str, object]:
        return {**IcanError.to_dict(self), "bcan": self.bcan, "reason": self.reason}


@final
@dataclass(frozen=True, slots=True)
class InvalidFormatArguments(IcanError):
    """Short-format counts are negative or exceed the identifier length."""

    front_count: int
    back_count: int
    length: int

    def to_dict(self) -> dict[str, object]:
        return {
            **IcanError.to_dict(self),
            "front_count": self.front_count,
            "back_count": self.back_count,
            "length": self.length,
        }
