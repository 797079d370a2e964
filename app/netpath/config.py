"""netpath configuration and settings.

Configuration is stored in ~/.config/netpath/config.toml. Every field
is optional; a missing file means defaults.

Example config.toml::

    backend = "statfs"
    strict_removable = false
    webdav_markers = ["DavWWWRoot", "@SSL"]
"""

import tomllib
from pathlib import Path
from typing import Annotated, Any

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from netpath.backends.base import BackendName
from netpath.classify.sysfs import SYSFS_ROOT
from netpath.core.paths import ensure_config_dir, get_config_path
from netpath.mounts.parser import MOUNTINFO_PATH
from netpath.windows.volume import DEFAULT_WEBDAV_MARKERS


class NetpathConfig(BaseModel):
    """Settings for path inspection.

    Attributes:
        backend: Inspection backend; "auto" picks one for the host.
        mountinfo_path: Mount table read by the mountinfo backend.
        sysfs_root: sysfs mount used for removable-media flags.
        strict_removable: Fail on unparseable removable flags instead of
            treating them as "not removable".
        webdav_markers: Tokens marking WebDAV universal names on Windows.
    """

    model_config = ConfigDict(extra="forbid")

    backend: Annotated[
        BackendName,
        Field(description="Inspection backend (auto, mountinfo, statfs, windows)"),
    ] = BackendName.AUTO
    mountinfo_path: Annotated[
        Path,
        Field(description="Mount table location"),
    ] = MOUNTINFO_PATH
    sysfs_root: Annotated[
        Path,
        Field(description="sysfs mount point"),
    ] = SYSFS_ROOT
    strict_removable: Annotated[
        bool,
        Field(description="Raise on unparseable removable flags"),
    ] = True
    webdav_markers: Annotated[
        list[str],
        Field(min_length=1, description="WebDAV markers in universal names"),
    ] = list(DEFAULT_WEBDAV_MARKERS)

    @field_validator("webdav_markers")
    @classmethod
    def validate_markers(cls, v: list[str]) -> list[str]:
        """Reject empty markers, which would match every universal name."""
        markers = [m.strip() for m in v]
        if any(not m for m in markers):
            msg = "webdav_markers cannot contain empty strings"
            raise ValueError(msg)
        return markers


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> NetpathConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default path.

    Returns:
        Validated NetpathConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return NetpathConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> NetpathConfig:
    """Load configuration, falling back to defaults when the file is absent.

    Parse and validation errors still propagate.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        return NetpathConfig()


def config_to_dict(config: NetpathConfig) -> dict[str, Any]:
    """Serialise a config to TOML-compatible primitives."""
    return config.model_dump(mode="json")


def save_config(config: NetpathConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    Args:
        config: The configuration to save.
        path: Destination. If None, uses the default path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    if path is None:
        try:
            ensure_config_dir()
        except RuntimeError as e:
            raise ConfigError(str(e)) from e
    config_path = path or get_config_path()

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "wb") as f:
            tomli_w.dump(config_to_dict(config), f)
    except OSError as e:
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path
