"""ican.core: result values, error values and shared types."""

from ican.core.errors import ChecksumInvalid as ChecksumInvalid
from ican.core.errors import CryptoVariantMismatch as CryptoVariantMismatch
from ican.core.errors import IcanError as IcanError
from ican.core.errors import InvalidFormatArguments as InvalidFormatArguments
from ican.core.errors import InvalidLocalPayload as InvalidLocalPayload
from ican.core.errors import InvalidStructure as InvalidStructure
from ican.core.errors import LengthMismatch as LengthMismatch
from ican.core.errors import RegistryMiss as RegistryMiss
from ican.core.errors import StructureMismatch as StructureMismatch
from ican.core.result import Err as Err
from ican.core.result import Ok as Ok
from ican.core.result import Result as Result
from ican.core.result import partition as partition
from ican.core.result import sequence as sequence
from ican.core.result import unwrap as unwrap
from ican.core.types import CryptoVariant as CryptoVariant
