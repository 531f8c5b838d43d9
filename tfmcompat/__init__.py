"""
tfmcompat: Target framework compatibility for .NET package assets

tfmcompat parses NuGet-style target framework monikers (``net45``,
``portable-net45+win8``, ``.NETFramework,Version=v4.5``) and decides which
package assets a project can use.

Features include:
    • Short folder names and long framework names, in both directions
    • Legacy aliases, profile equivalences and portable profile tables
    • Project/package compatibility checks
    • Nearest-asset selection and framework set reduction

Typical usage::

    >>> from tfmcompat import parse, is_compatible, get_nearest
    >>> is_compatible(parse("net451"), parse("portable-net45+win8"))
    True
"""

from __future__ import annotations

from tfmcompat.__version__ import __version__

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__author__ = "tfmcompat Contributors"
__license__ = "Apache-2.0"
__description__ = "Target framework parsing, compatibility and nearest-match selection."

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

from tfmcompat.core.compatibility import is_compatible
from tfmcompat.core.expander import expand
from tfmcompat.core.parser import (
    parse,
    parse_folder,
    parse_framework_name,
    to_short_folder_name,
)
from tfmcompat.core.reducer import (
    get_nearest,
    reduce,
    reduce_downwards,
    reduce_equivalent,
    reduce_upwards,
)
from tfmcompat.exceptions import ConfigError, ParseError, TfmCompatError
from tfmcompat.models import (
    AGNOSTIC_FRAMEWORK,
    ANY_FRAMEWORK,
    UNSUPPORTED_FRAMEWORK,
    FrameworkIdentity,
    FrameworkRange,
    OneWayCompatibilityMapping,
    PortableProfile,
)

__all__ = [
    "__version__",
    # Parsing
    "parse",
    "parse_folder",
    "parse_framework_name",
    "to_short_folder_name",
    # Compatibility
    "is_compatible",
    "expand",
    # Reduction
    "get_nearest",
    "reduce",
    "reduce_upwards",
    "reduce_downwards",
    "reduce_equivalent",
    # Models
    "FrameworkIdentity",
    "PortableProfile",
    "FrameworkRange",
    "OneWayCompatibilityMapping",
    "ANY_FRAMEWORK",
    "AGNOSTIC_FRAMEWORK",
    "UNSUPPORTED_FRAMEWORK",
    # Errors
    "TfmCompatError",
    "ParseError",
    "ConfigError",
]
