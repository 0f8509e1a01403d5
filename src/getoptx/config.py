"""Configuration loading and deterministic merge order."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from getoptx.engine import ReparseModes

CONFIG_ENV_VAR = "GETOPTX_CONFIG"

_MODE_FIELDS = (
    "concat_numeric",
    "elide_errors",
    "abort_on_error",
    "normalize_punctuation",
    "quiet",
)
_KNOWN_SECTIONS = ("modes", "output", "audit")


@dataclass(slots=True, frozen=True)
class GetoptxConfig:
    """Fully merged configuration."""

    modes: ReparseModes = field(default_factory=ReparseModes)
    display_name: str | None = None
    audit_log_path: Path | None = None


@dataclass(slots=True, frozen=True)
class CliOverrides:
    """Flags from the command line, applied at highest precedence."""

    concat_numeric: bool = False
    elide_errors: bool = False
    abort_on_error: bool = False
    normalize_punctuation: bool = False
    quiet: bool = False
    display_name: str | None = None


def default_config() -> GetoptxConfig:
    """Build the default configuration."""
    return GetoptxConfig()


def config_path_from_env() -> Path | None:
    """Return the config file named by GETOPTX_CONFIG, if any."""
    raw = os.getenv(CONFIG_ENV_VAR, "").strip()
    if not raw:
        return None
    return Path(raw)


def load_config_file(config_path: Path) -> dict[str, object]:
    """Load a TOML config file."""
    with config_path.open("rb") as handle:
        payload = tomllib.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"{config_path.name} must contain a top-level table.")
    return payload


def _get_table(payload: dict[str, object], key: str) -> dict[str, object]:
    value = payload.get(key, {})
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{key}' must be a table.")
    return value


def merge_config(
    base: GetoptxConfig, payload: dict[str, object], base_dir: Path | None = None
) -> GetoptxConfig:
    """Merge a parsed config file over base."""
    for key in sorted(payload.keys()):
        if key not in _KNOWN_SECTIONS:
            raise ValueError(f"Config section '{key}' is not supported.")
    modes_payload = _get_table(payload, "modes")
    output_payload = _get_table(payload, "output")
    audit_payload = _get_table(payload, "audit")

    mode_values: dict[str, bool] = {}
    for name in _MODE_FIELDS:
        current = getattr(base.modes, name)
        raw = modes_payload.get(name, current)
        if not isinstance(raw, bool):
            raise ValueError(f"Config field 'modes.{name}' must be a boolean.")
        mode_values[name] = raw
    for name in sorted(modes_payload.keys()):
        if name not in _MODE_FIELDS:
            raise ValueError(f"Config field 'modes.{name}' is not supported.")

    display_name = base.display_name
    if "display_name" in output_payload:
        raw_name = output_payload["display_name"]
        if not isinstance(raw_name, str) or not raw_name:
            raise ValueError("Config field 'output.display_name' must be a non-empty string.")
        display_name = raw_name

    audit_log_path = base.audit_log_path
    if "log_path" in audit_payload:
        raw_path = audit_payload["log_path"]
        if not isinstance(raw_path, str) or not raw_path:
            raise ValueError("Config field 'audit.log_path' must be a non-empty string.")
        audit_log_path = Path(raw_path)
        if base_dir is not None and not audit_log_path.is_absolute():
            audit_log_path = base_dir / audit_log_path

    return GetoptxConfig(
        modes=ReparseModes(**mode_values),
        display_name=display_name,
        audit_log_path=audit_log_path,
    )


def apply_cli_overrides(config: GetoptxConfig, overrides: CliOverrides) -> GetoptxConfig:
    """Apply command-line flags; flags can only switch modes on."""
    modes = ReparseModes(
        **{
            name: getattr(config.modes, name) or getattr(overrides, name)
            for name in _MODE_FIELDS
        }
    )
    return GetoptxConfig(
        modes=modes,
        display_name=overrides.display_name or config.display_name,
        audit_log_path=config.audit_log_path,
    )


def load_effective_config(
    config_path: Path | None = None, overrides: CliOverrides | None = None
) -> GetoptxConfig:
    """Load effective config using merge order defaults -> config file -> overrides."""
    config = default_config()
    if config_path is not None:
        payload = load_config_file(config_path)
        config = merge_config(config, payload, base_dir=config_path.resolve().parent)
    return apply_cli_overrides(config, overrides or CliOverrides())
