"""ican: International Crypto Account Number validation and conversion."""

from ican.api import from_bcan as from_bcan
from ican.api import is_valid as is_valid
from ican.api import is_valid_bcan as is_valid_bcan
from ican.api import to_bcan as to_bcan
from ican.api import validate as validate
from ican.api import validate_bcan as validate_bcan
from ican.config import DEFAULT_FORMAT_CONFIG as DEFAULT_FORMAT_CONFIG
from ican.config import FormatConfig as FormatConfig
from ican.core.result import Err as Err
from ican.core.result import Ok as Ok
from ican.core.types import CryptoVariant as CryptoVariant
from ican.formatting import electronic_format as electronic_format
from ican.formatting import print_format as print_format
from ican.formatting import short_format as short_format
from ican.registry import RegistryError as RegistryError
from ican.registry import get_specification as get_specification
from ican.registry import self_check as self_check
from ican.registry import specifications as specifications
from ican.spec.specification import Specification as Specification
