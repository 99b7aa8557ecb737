"""
ElfHead Configuration Management
=================================

Centralized configuration for the ElfHead tools using Python dataclasses
and TOML-based persistence.

Configuration is kept apart from code: every setting has a dataclass
default and may be overridden from a ``config.toml`` file.

Example ``config.toml``::

    [global]
    log_level = "DEBUG"
    log_file = "logs/elfhead.log"
    log_json = true

    [inspect]
    required_extension = ".o"
    max_file_size = 1048576

References:
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class InspectConfig:
    """Configuration for the ``elfhead`` object inspector.

    Controls which files the command line accepts and how much of a
    file the engine is willing to read into memory.
    """

    required_extension: str = ".o"
    max_file_size: int = 268_435_456  # 256 MiB
    report_indent: int = 2


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings shared by every ElfHead command.

    Controls logging verbosity and the optional log file.
    """

    log_level: str = "WARNING"
    log_file: str | None = None
    log_json: bool = False
    version: str = "0.1.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class ElfHeadConfig:
    """Master configuration aggregating the global and tool settings.

    Usage:
        >>> config = ElfHeadConfig.load()                  # from default path
        >>> config = ElfHeadConfig.load("custom.toml")     # from custom path
        >>> print(config.inspect.required_extension)
        '.o'
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    inspect: InspectConfig = field(default_factory=InspectConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> ElfHeadConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.
                  Defaults to ``<project_root>/config.toml``.

        Returns:
            A fully-populated :class:`ElfHeadConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
            tomllib.TOMLDecodeError: If the file is not valid TOML.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            inspect=cls._build_section(InspectConfig, raw.get("inspect", {})),
        )

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are ignored.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)

