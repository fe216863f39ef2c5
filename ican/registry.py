"""Static ICAN registry: country and crypto-asset layouts.

REGISTRY_DATA is fixed, read-only data. The compiled registry is built
eagerly at import; a malformed entry raises RegistryError so packaging
bugs fail at startup rather than on first lookup.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Final

from ican.core.errors import IcanError, RegistryMiss
from ican.core.result import Err, Ok, partition, sequence
from ican.core.types import CryptoVariant
from ican.spec.engine import validate
from ican.spec.specification import Specification, validate_code

logger = logging.getLogger(__name__)

_NONE = CryptoVariant.NONE
_MAIN = CryptoVariant.MAIN
_TEST = CryptoVariant.TEST
_ENTERPRISE = CryptoVariant.ENTERPRISE

type RegistryEntry = tuple[int, str, CryptoVariant, str]

# code -> (length, structure, crypto variant, example)
REGISTRY_DATA: Final[MappingProxyType[str, RegistryEntry]] = MappingProxyType({
    "AB": (44, "H40", _TEST, "AB841234567890ABCDEF1234567890ABCDEF12345678"),
    "AD": (24, "F04F04A12", _NONE, "AD1200012030200359100100"),
    "AE": (23, "F03F16", _NONE, "AE070331234567890123456"),
    "AL": (28, "F08A16", _NONE, "AL47212110090000000235698741"),
    "AO": (25, "F21", _NONE, "AO69123456789012345678901"),
    "AT": (20, "F05F11", _NONE, "AT611904300234573201"),
    "AZ": (28, "U04A20", _NONE, "AZ21NABZ00000000137010001944"),
    "BA": (20, "F03F03F08F02", _NONE, "BA391290079401028494"),
    "BE": (16, "F03F07F02", _NONE, "BE68539007547034"),
    "BF": (27, "F23", _NONE, "BF2312345678901234567890123"),
    "BG": (22, "U04F04F02A08", _NONE, "BG80BNBG96611020345678"),
    "BH": (22, "U04A14", _NONE, "BH67BMAG00001299123456"),
    "BI": (16, "F12", _NONE, "BI41123456789012"),
    "BJ": (28, "F24", _NONE, "BJ39123456789012345678901234"),
    "BL": (27, "F05F05A11F02", _NONE, "BL391234512345123456789AB13"),
    "BR": (29, "F08F05F10U01A01", _NONE, "BR9700360305000010009795493P1"),
    "BY": (28, "A04F04A16", _NONE, "BY13NBRB3600900000002Z00AB00"),
    "CB": (44, "H40", _MAIN, "CB661234567890ABCDEF1234567890ABCDEF12345678"),
    "CE": (44, "H40", _ENTERPRISE, "CE571234567890ABCDEF1234567890ABCDEF12345678"),
    "CH": (21, "F05A12", _NONE, "CH9300762011623852957"),
    "CI": (28, "U02F22", _NONE, "CI70CI1234567890123456789012"),
    "CM": (27, "F23", _NONE, "CM9012345678901234567890123"),
    "CR": (22, "F04F14", _NONE, "CR72012300000171549015"),
    "CV": (25, "F21", _NONE, "CV30123456789012345678901"),
    "CY": (28, "F03F05A16", _NONE, "CY17002001280000001200527600"),
    "CZ": (24, "F04F06F10", _NONE, "CZ6508000000192000145399"),
    "DE": (22, "F08F10", _NONE, "DE89370400440532013000"),
    "DK": (18, "F04F09F01", _NONE, "DK5000400440116243"),
    "DO": (28, "U04F20", _NONE, "DO28BAGR00000001212453611324"),
    "DZ": (24, "F20", _NONE, "DZ8612345678901234567890"),
    "EE": (20, "F02F02F11F01", _NONE, "EE382200221020145685"),
    "EG": (29, "F04F04F17", _NONE, "EG800002000156789012345180002"),
    "ES": (24, "F04F04F01F01F10", _NONE, "ES9121000418450200051332"),
    "FI": (18, "F06F07F01", _NONE, "FI2112345600000785"),
    "FO": (18, "F04F09F01", _NONE, "FO6264600001631634"),
    "FR": (27, "F05F05A11F02", _NONE, "FR1420041010050500013M02606"),
    "GB": (22, "U04F06F08", _NONE, "GB29NWBK60161331926819"),
    "GE": (22, "U02F16", _NONE, "GE29NB0000000101904917"),
    "GF": (27, "F05F05A11F02", _NONE, "GF121234512345123456789AB13"),
    "GI": (23, "U04A15", _NONE, "GI75NWBK000000007099453"),
    "GL": (18, "F04F09F01", _NONE, "GL8964710001000206"),
    "GP": (27, "F05F05A11F02", _NONE, "GP791234512345123456789AB13"),
    "GR": (27, "F03F04A16", _NONE, "GR1601101250000000012300695"),
    "GT": (28, "A04A20", _NONE, "GT82TRAJ01020000001210029690"),
    "HR": (21, "F07F10", _NONE, "HR1210010051863000160"),
    "HU": (28, "F03F04F01F15F01", _NONE, "HU42117730161111101800000000"),
    "IE": (22, "U04F06F08", _NONE, "IE29AIBK93115212345678"),
    "IL": (23, "F03F03F13", _NONE, "IL620108000000099999999"),
    "IQ": (23, "U04F03A12", _NONE, "IQ98NBIQ850123456789012"),
    "IR": (26, "F22", _NONE, "IR861234568790123456789012"),
    "IS": (26, "F04F02F06F10", _NONE, "IS140159260076545510730339"),
    "IT": (27, "U01F05F05A12", _NONE, "IT60X0542811101000000123456"),
    "JO": (30, "A04F22", _NONE, "JO15AAAA1234567890123456789012"),
    "KW": (30, "U04A22", _NONE, "KW81CBKU0000000000001234560101"),
    "KZ": (20, "F03A13", _NONE, "KZ86125KZT5004100100"),
    "LB": (28, "F04A20", _NONE, "LB62099900000001001901229114"),
    "LC": (32, "U04F24", _NONE, "LC07HEMM000100010012001200013015"),
    "LI": (21, "F05A12", _NONE, "LI21088100002324013AA"),
    "LT": (20, "F05F11", _NONE, "LT121000011101001000"),
    "LU": (20, "F03A13", _NONE, "LU280019400644750000"),
    "LV": (21, "U04A13", _NONE, "LV80BANK0000435195001"),
    "MC": (27, "F05F05A11F02", _NONE, "MC5811222000010123456789030"),
    "MD": (24, "U02A18", _NONE, "MD24AG000225100013104168"),
    "ME": (22, "F03F13F02", _NONE, "ME25505000012345678951"),
    "MF": (27, "F05F05A11F02", _NONE, "MF551234512345123456789AB13"),
    "MG": (27, "F23", _NONE, "MG1812345678901234567890123"),
    "MK": (19, "F03A10F02", _NONE, "MK07250120000058984"),
    "ML": (28, "U01F23", _NONE, "ML15A12345678901234567890123"),
    "MQ": (27, "F05F05A11F02", _NONE, "MQ221234512345123456789AB13"),
    "MR": (27, "F05F05F11F02", _NONE, "MR1300020001010000123456753"),
    "MT": (31, "U04F05A18", _NONE, "MT84MALT011000012345MTLCAST001S"),
    "MU": (30, "U04F02F02F12F03U03", _NONE, "MU17BOMM0101101030300200000MUR"),
    "MZ": (25, "F21", _NONE, "MZ25123456789012345678901"),
    "NC": (27, "F05F05A11F02", _NONE, "NC551234512345123456789AB13"),
    "NL": (18, "U04F10", _NONE, "NL91ABNA0417164300"),
    "NO": (15, "F04F06F01", _NONE, "NO9386011117947"),
    "PF": (27, "F05F05A11F02", _NONE, "PF281234512345123456789AB13"),
    "PK": (24, "U04A16", _NONE, "PK36SCBL0000001123456702"),
    "PL": (28, "F08F16", _NONE, "PL61109010140000071219812874"),
    "PM": (27, "F05F05A11F02", _NONE, "PM071234512345123456789AB13"),
    "PS": (29, "U04A21", _NONE, "PS92PALS000000000400123456702"),
    "PT": (25, "F04F04F11F02", _NONE, "PT50000201231234567890154"),
    "QA": (29, "U04A21", _NONE, "QA30AAAA123456789012345678901"),
    "RE": (27, "F05F05A11F02", _NONE, "RE131234512345123456789AB13"),
    "RO": (24, "U04A16", _NONE, "RO49AAAA1B31007593840000"),
    "RS": (22, "F03F13F02", _NONE, "RS35260005601001611379"),
    "SA": (24, "F02A18", _NONE, "SA0380000000608010167519"),
    "SC": (31, "U04F04F16U03", _NONE, "SC18SSCB11010000000000001497USD"),
    "SE": (24, "F03F16F01", _NONE, "SE4550000000058398257466"),
    "SI": (19, "F05F08F02", _NONE, "SI56263300012039086"),
    "SK": (24, "F04F06F10", _NONE, "SK3112000000198742637541"),
    "SM": (27, "U01F05F05A12", _NONE, "SM86U0322509800000000270100"),
    "SN": (28, "U01F23", _NONE, "SN52A12345678901234567890123"),
    "ST": (25, "F08F11F02", _NONE, "ST68000100010051845310112"),
    "SV": (28, "U04F20", _NONE, "SV62CENR00000000000000700025"),
    "TF": (27, "F05F05A11F02", _NONE, "TF891234512345123456789AB13"),
    "TL": (23, "F03F14F02", _NONE, "TL380080012345678910157"),
    "TN": (24, "F02F03F13F02", _NONE, "TN5910006035183598478831"),
    "TR": (26, "F05F01A16", _NONE, "TR330006100519786457841326"),
    "UA": (29, "F25", _NONE, "UA511234567890123456789012345"),
    "VA": (22, "F18", _NONE, "VA59001123000012345678"),
    "VG": (24, "U04F16", _NONE, "VG96VPVG0000012345678901"),
    "WF": (27, "F05F05A11F02", _NONE, "WF621234512345123456789AB13"),
    "XK": (20, "F04F10F02", _NONE, "XK051212012345678906"),
    "YT": (27, "F05F05A11F02", _NONE, "YT021234512345123456789AB13"),
})


class RegistryError(RuntimeError):
    """A registry entry is malformed. Raised at import, never at lookup."""


def _build(
    data: MappingProxyType[str, RegistryEntry],
) -> MappingProxyType[str, Specification]:
    built = sequence(
        Specification.create(code, length, structure, crypto, example)
        for code, (length, structure, crypto, example) in data.items()
    )
    match built:
        case Err(error):
            logger.error("Malformed registry entry: %s", error.message)
            raise RegistryError(error.message)
        case Ok(specs):
            logger.debug("Loaded %d ICAN specifications", len(specs))
            return MappingProxyType({s.code: s for s in specs})


_SPECIFICATIONS: Final = _build(REGISTRY_DATA)


def get_specification(code: str) -> Ok[Specification] | Err[RegistryMiss]:
    """Exact, case-sensitive lookup of a two-letter code."""
    match validate_code(code, "registry.get_specification"):
        case Err() as e:
            return e
    spec = _SPECIFICATIONS.get(code)
    if spec is None:
        return Err(RegistryMiss(
            message=f"Unknown country code: '{code}'",
            code="REGISTRY_MISS",
            source="registry.get_specification",
            country_code=code,
        ))
    return Ok(spec)


def specifications() -> tuple[Specification, ...]:
    """All specifications, sorted by code."""
    return tuple(_SPECIFICATIONS[code] for code in sorted(_SPECIFICATIONS))


def _check_example(spec: Specification) -> Ok[str] | Err[IcanError]:
    match validate(spec, spec.example):
        case Err(error):
            return Err(error.with_context(f"{spec.code} example"))
        case ok:
            return ok


def self_check() -> Ok[int] | Err[tuple[IcanError, ...]]:
    """Validate every entry's example against its own specification.

    Returns Ok(number of entries checked) or every failure found.
    """
    checked, errors = partition(_check_example(spec) for spec in specifications())
    if errors:
        return Err(tuple(errors))
    return Ok(len(checked))
