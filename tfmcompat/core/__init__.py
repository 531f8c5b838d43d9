"""
Core functionality exports for tfmcompat.

This module provides convenient access to the core subsystems of tfmcompat.
Importing from here keeps user-facing imports clean and stable:

    from tfmcompat.core import FrameworkParser, FrameworkReducer
"""

from __future__ import annotations

from tfmcompat.core.compatibility import CompatibilityProvider
from tfmcompat.core.expander import FrameworkExpander
from tfmcompat.core.mappings import DEFAULT_FRAMEWORK_MAPPINGS, FrameworkMappings
from tfmcompat.core.name_provider import FrameworkNameProvider, get_default_name_provider
from tfmcompat.core.parser import FrameworkParser
from tfmcompat.core.portable_mappings import (
    DEFAULT_PORTABLE_MAPPINGS,
    PortableFrameworkMappings,
)
from tfmcompat.core.reducer import FrameworkReducer

__all__ = [
    "FrameworkParser",
    "FrameworkExpander",
    "CompatibilityProvider",
    "FrameworkReducer",
    "FrameworkNameProvider",
    "get_default_name_provider",
    "FrameworkMappings",
    "PortableFrameworkMappings",
    "DEFAULT_FRAMEWORK_MAPPINGS",
    "DEFAULT_PORTABLE_MAPPINGS",
]
