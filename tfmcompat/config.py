"""Configuration file loader for tfmcompat.

Handles discovery, loading, parsing, and validation of configuration files.
Supports two formats:

- ``tfmcompat.toml``: settings under ``[tfmcompat]`` table
- ``pyproject.toml``: settings under ``[tool.tfmcompat]`` table

Discovery order:

1. Explicit path passed to :func:`load_config`
2. ``tfmcompat.toml`` in current directory
3. ``pyproject.toml`` with ``[tool.tfmcompat]`` section

The configuration only extends the built-in mapping tables; it never
replaces them. Nothing is read unless :func:`load_config` is called.

Typical usage::

    config = load_config()  # Auto-discover
    provider = create_name_provider(config)
    parser = FrameworkParser(provider)

Example (``tfmcompat.toml``)::

    [tfmcompat]
    framework_precedence = ["MonoAndroid"]
    equivalent_frameworks = [["netcore50", "uap10.0"]]

    [tfmcompat.identifier_synonyms]
    NETStore = ".NETCore"
"""

from __future__ import annotations


import tomli as tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
from dataclasses import dataclass, field

from tfmcompat.constants import CONFIG_FILE_NAME, CONFIG_SECTION
from tfmcompat.core.mappings import DEFAULT_FRAMEWORK_MAPPINGS, FrameworkMappings
from tfmcompat.core.name_provider import FrameworkNameProvider, get_default_name_provider
from tfmcompat.core.parser import FrameworkParser
from tfmcompat.core.portable_mappings import DEFAULT_PORTABLE_MAPPINGS
from tfmcompat.exceptions import ConfigError, ParseError
from tfmcompat.models.framework import FrameworkIdentity
from tfmcompat.utils.logger import get_logger

logger = get_logger("config")


@dataclass
class TfmCompatConfig:
    """Parsed and validated tfmcompat configuration.

    Contains settings from ``tfmcompat.toml`` or ``pyproject.toml``.
    All fields have defaults, so empty config files are valid.

    Attributes:
        identifier_synonyms: Extra names for known identifiers, mapped to
            the canonical identifier.
        framework_precedence: Identifiers appended to the built-in
            precedence order used to break nearest-match ties.
        equivalent_frameworks: Pairs of frameworks treated as mutually
            compatible.
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    identifier_synonyms: Dict[str, str] = field(default_factory=dict)
    framework_precedence: List[str] = field(default_factory=list)
    equivalent_frameworks: List[Tuple[FrameworkIdentity, FrameworkIdentity]] = field(
        default_factory=list
    )

    # Metadata (not a user-facing option)
    source_path: Optional[Path] = field(default=None, repr=False)

    @property
    def is_empty(self) -> bool:
        """``True`` when no option extends the built-in tables."""
        return not (
            self.identifier_synonyms
            or self.framework_precedence
            or self.equivalent_frameworks
        )

    def to_log_dict(self) -> Dict[str, Any]:
        """Return configuration as dictionary for debug logging.

        Excludes ``source_path`` metadata.

        Returns:
            Dictionary of configuration option names to values.
        """
        return {
            "identifier_synonyms": dict(self.identifier_synonyms),
            "framework_precedence": list(self.framework_precedence),
            "equivalent_frameworks": [
                [str(first), str(second)] for first, second in self.equivalent_frameworks
            ],
        }

    def to_mappings(self) -> FrameworkMappings:
        """Return the options as a mapping source for a name provider."""
        return FrameworkMappings(
            identifier_synonyms=tuple(sorted(self.identifier_synonyms.items())),
            equivalent_frameworks=tuple(self.equivalent_frameworks),
            framework_precedence=tuple(self.framework_precedence),
        )


def create_name_provider(config: Optional[TfmCompatConfig] = None) -> FrameworkNameProvider:
    """Build a name provider with the configured mappings layered on the defaults.

    Without configuration (or with an empty one) the shared default
    provider is returned.
    """
    if config is None or config.is_empty:
        return get_default_name_provider()

    logger.debug("Creating name provider with configured mappings")
    return FrameworkNameProvider(
        [DEFAULT_FRAMEWORK_MAPPINGS, config.to_mappings()],
        [DEFAULT_PORTABLE_MAPPINGS],
    )


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Search order:

    1. ``explicit_path``
    2. ``tfmcompat.toml`` in current directory
    3. ``pyproject.toml`` with ``[tool.tfmcompat]`` section in current directory

    Validates ``pyproject.toml`` contains tfmcompat section before using it.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    # 1. Explicit path takes priority
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    # 2. tfmcompat.toml in current directory
    tfmcompat_toml = cwd / CONFIG_FILE_NAME
    if tfmcompat_toml.is_file():
        logger.debug("Found %s: %s", CONFIG_FILE_NAME, tfmcompat_toml)
        return tfmcompat_toml

    # 3. pyproject.toml with [tool.tfmcompat] section
    pyproject_toml = cwd / "pyproject.toml"
    if pyproject_toml.is_file():
        if _pyproject_has_tfmcompat_section(pyproject_toml):
            logger.debug("Found [tool.tfmcompat] in pyproject.toml: %s", pyproject_toml)
            return pyproject_toml

    logger.debug("No configuration file found")
    return None


def _pyproject_has_tfmcompat_section(path: Path) -> bool:
    """Check if pyproject.toml contains [tool.tfmcompat] section.

    Parse errors count as "no section" so a broken pyproject.toml does not
    block discovery.
    """
    try:
        raw = _read_toml(path)
    except ConfigError:
        return False
    tool = raw.get("tool", {})
    return isinstance(tool, dict) and CONFIG_SECTION in tool


def load_config(config_path: Optional[Path] = None) -> TfmCompatConfig:
    """Load and validate tfmcompat configuration.

    Discovers config file (or uses provided path), parses and validates it.
    Returns config with defaults if no file found.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`TfmCompatConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        logger.debug("No config file found, using defaults")
        return TfmCompatConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    # Extract the tfmcompat-specific section
    if resolved.name == "pyproject.toml":
        section = raw.get("tool", {}).get(CONFIG_SECTION, {})
    else:
        # tfmcompat.toml keeps settings under [tfmcompat]
        section = raw.get(CONFIG_SECTION, {})

    if not section:
        logger.debug("Config file found but no tfmcompat section, using defaults")
        return TfmCompatConfig(source_path=resolved)

    if not isinstance(section, dict):
        raise ConfigError(
            f"[{CONFIG_SECTION}] must be a table",
            config_path=str(resolved),
        )

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> TfmCompatConfig:
    """Parse and validate tfmcompat configuration section.

    Validates ``[tfmcompat]`` or ``[tool.tfmcompat]`` table from TOML.
    Rejects unknown keys, type mismatches, unknown identifiers and
    framework tokens that do not parse.

    Args:
        section: Raw config dictionary from TOML file.
        config_path: Path string for error messages.

    Returns:
        Validated :class:`TfmCompatConfig` with values from section and defaults.

    Raises:
        ConfigError: Unknown keys, incorrect types or invalid values.
    """
    config = TfmCompatConfig()
    provider = get_default_name_provider()

    # Known tfmcompat configuration options
    known_top = {
        "identifier_synonyms",
        "framework_precedence",
        "equivalent_frameworks",
    }

    # Validate that no unknown keys are present
    unknown_top = set(section.keys()) - known_top
    if unknown_top:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown_top))}",
            config_path=config_path,
        )

    if "identifier_synonyms" in section:
        val = section["identifier_synonyms"]
        if not isinstance(val, dict):
            raise ConfigError(
                f"identifier_synonyms must be a table, got {type(val).__name__}",
                config_path=config_path,
                option="identifier_synonyms",
            )
        for alias, target in val.items():
            if not isinstance(target, str):
                raise ConfigError(
                    f"identifier_synonyms.{alias} must be a string, got {type(target).__name__}",
                    config_path=config_path,
                    option="identifier_synonyms",
                )
            identifier = provider.get_identifier(target)
            if identifier is None:
                raise ConfigError(
                    f"identifier_synonyms.{alias} names an unknown identifier: {target!r}",
                    config_path=config_path,
                    option="identifier_synonyms",
                )
            config.identifier_synonyms[alias] = identifier

    if "framework_precedence" in section:
        val = section["framework_precedence"]
        if not isinstance(val, list) or not all(isinstance(item, str) for item in val):
            raise ConfigError(
                "framework_precedence must be an array of strings",
                config_path=config_path,
                option="framework_precedence",
            )
        config.framework_precedence = list(val)

    if "equivalent_frameworks" in section:
        val = section["equivalent_frameworks"]
        if not isinstance(val, list):
            raise ConfigError(
                f"equivalent_frameworks must be an array, got {type(val).__name__}",
                config_path=config_path,
                option="equivalent_frameworks",
            )
        parser = FrameworkParser(provider)
        for pair in val:
            if (
                not isinstance(pair, list)
                or len(pair) != 2
                or not all(isinstance(token, str) for token in pair)
            ):
                raise ConfigError(
                    "equivalent_frameworks entries must be pairs of framework names",
                    config_path=config_path,
                    option="equivalent_frameworks",
                )
            first = _parse_token(parser, pair[0], config_path)
            second = _parse_token(parser, pair[1], config_path)
            config.equivalent_frameworks.append((first, second))

    return config


def _parse_token(parser: FrameworkParser, token: str, config_path: str) -> FrameworkIdentity:
    try:
        framework = parser.parse(token)
    except ParseError as exc:
        raise ConfigError(
            f"Invalid framework in equivalent_frameworks: {exc}",
            config_path=config_path,
            option="equivalent_frameworks",
        ) from exc

    if not framework.is_specific or framework.is_pcl:
        raise ConfigError(
            f"equivalent_frameworks cannot use {token!r}",
            config_path=config_path,
            option="equivalent_frameworks",
        )
    return framework
