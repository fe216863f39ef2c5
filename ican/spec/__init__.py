"""ican.spec: structure compiler, checksum engine, Specification and engine."""

from ican.spec.checksum import check_digits as check_digits
from ican.spec.checksum import is_checksum_valid as is_checksum_valid
from ican.spec.checksum import mod97 as mod97
from ican.spec.checksum import rearrange as rearrange
from ican.spec.specification import Specification as Specification
from ican.spec.structure import CharClass as CharClass
from ican.spec.structure import Segment as Segment
from ican.spec.structure import StructureMatcher as StructureMatcher
from ican.spec.structure import compile_structure as compile_structure
