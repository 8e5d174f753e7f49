"""Configuration loading: TOML files, environment and overrides → AnalysisConfig.

Sources are merged in priority order (lowest to highest):
    1. Defaults (AnalysisConfig field defaults, or a preset)
    2. `[tool.layercheck]` in pyproject.toml of the search directory
    3. layercheck.toml of the search directory
    4. Explicit config file
    5. Environment variables (LAYERCHECK_* prefix)
    6. Keyword overrides (typically CLI flags)

Example layercheck.toml:

    preset = "ci"
    excluded_dirs = ["build", "generated"]
    disabled_checks = ["placement"]
    extra_external_type_prefixes = ["Clock"]

    [layers]
    domain = ["domain.entities", "domain.repositories"]
    data = ["data", "network"]

    [binding]
    implementation_suffix = "Impl"
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import fields
from pathlib import Path
from typing import Any

from layercheck.domain.exceptions import ConfigError
from layercheck.domain.model.configuration import AnalysisConfig, BindingConvention
from layercheck.domain.model.enums import FindingCategory, Layer
from layercheck.domain.model.layer_rules import LayerRule

PROJECT_CONFIG = "layercheck.toml"
PYPROJECT = "pyproject.toml"

_PRESETS = {
    "default": AnalysisConfig,
    "ci": AnalysisConfig.for_ci,
    "development": AnalysisConfig.for_development,
}

# Scalar fields: type-checked in files, settable from LAYERCHECK_<FIELD>
_SCALAR_FIELDS: dict[str, type] = {
    "parallel": bool,
    "check_placement": bool,
    "max_workers": int,
}

_TRUE = frozenset({"true", "1", "yes", "on"})
_FALSE = frozenset({"false", "0", "no", "off"})


def load_config(
    config_file: Path | str | None = None,
    *,
    search_dir: Path | str | None = None,
    **overrides: Any,
) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file (layercheck.toml or pyproject.toml)
        search_dir: Directory searched for project config (default: cwd)
        **overrides: Direct overrides, AnalysisConfig field names

    Returns:
        Validated AnalysisConfig

    Raises:
        ConfigError: If a config file is missing, unparsable or invalid
    """
    directory = Path(search_dir) if search_dir is not None else Path.cwd()
    merged: dict[str, Any] = {}

    pyproject = directory / PYPROJECT
    if pyproject.is_file():
        merged.update(_load_toml_file(pyproject))

    project = directory / PROJECT_CONFIG
    if project.is_file():
        merged.update(_load_toml_file(project))

    if config_file is not None:
        path = Path(config_file)
        if not path.is_file():
            raise ConfigError(f"config file not found: {path}")
        merged.update(_load_toml_file(path))

    merged.update(_load_env_vars())
    merged.update({k: v for k, v in overrides.items() if v is not None})

    return build_config(merged)


def build_config(values: dict[str, Any]) -> AnalysisConfig:
    """Build AnalysisConfig from a flat mapping of TOML-style values.

    Raises:
        ConfigError: On unknown keys, wrong types or failed validation
    """
    values = {key.replace("-", "_"): value for key, value in values.items()}

    preset_name = values.pop("preset", "default")
    preset = _PRESETS.get(preset_name)
    if preset is None:
        raise ConfigError(f"unknown preset {preset_name!r}, expected one of {sorted(_PRESETS)}")
    base = preset()

    changes: dict[str, Any] = {}

    if "layers" in values:
        changes["layer_rules"] = _parse_layers(values.pop("layers"))
    if "binding" in values:
        changes["binding_convention"] = _parse_binding(values.pop("binding"))
    if "disabled_checks" in values:
        changes["disabled_checks"] = _parse_checks(values.pop("disabled_checks"))

    extra_prefixes = values.pop("extra_external_type_prefixes", None)

    known = {f.name for f in fields(AnalysisConfig)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ConfigError(f"unknown configuration keys: {', '.join(unknown)}")

    for key, value in values.items():
        if key in ("source_suffixes", "external_type_prefixes"):
            changes[key] = tuple(_string_list(key, value))
        elif key == "excluded_dirs":
            changes[key] = frozenset(_string_list(key, value))
        elif key in _SCALAR_FIELDS:
            changes[key] = _scalar(key, value, _SCALAR_FIELDS[key])
        else:
            changes[key] = value

    if extra_prefixes is not None:
        current = changes.get("external_type_prefixes", base.external_type_prefixes)
        changes["external_type_prefixes"] = tuple(current) + tuple(
            _string_list("extra_external_type_prefixes", extra_prefixes)
        )

    try:
        return base.with_overrides(**changes)
    except (TypeError, ValueError) as e:
        raise ConfigError(str(e)) from e


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file. pyproject.toml contributes only [tool.layercheck].

    Raises:
        ConfigError: If the file cannot be read or parsed
    """
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"cannot read {path}: {e}") from e

    if path.name == PYPROJECT:
        section = data.get("tool", {}).get("layercheck", {})
        if not isinstance(section, dict):
            raise ConfigError(f"[tool.layercheck] in {path} must be a table")
        return dict(section)
    return data


def _load_env_vars() -> dict[str, Any]:
    """Load LAYERCHECK_* environment variables for scalar fields."""
    result: dict[str, Any] = {}

    for field_name, kind in _SCALAR_FIELDS.items():
        env_key = f"LAYERCHECK_{field_name.upper()}"
        raw = os.environ.get(env_key)
        if raw is None:
            continue

        if kind is bool:
            lower = raw.strip().lower()
            if lower in _TRUE:
                result[field_name] = True
            elif lower in _FALSE:
                result[field_name] = False
            else:
                raise ConfigError(f"invalid {env_key}: expected true/false, got {raw!r}")
        else:
            try:
                result[field_name] = int(raw)
            except ValueError as e:
                raise ConfigError(f"invalid {env_key}: expected integer, got {raw!r}") from e

    return result


def _scalar(key: str, value: Any, kind: type) -> Any:
    # bool is a subclass of int
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ConfigError(f"{key} must be {kind.__name__}, got {value!r}")
    return value


def _string_list(key: str, value: Any) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{key} must be a list of strings")
    return value


def _parse_layer(key: str, name: Any) -> Layer:
    if not isinstance(name, str):
        raise ConfigError(f"{key} must be a layer name")
    try:
        return Layer[name.upper()]
    except KeyError as e:
        raise ConfigError(f"{key}: unknown layer {name!r}") from e


def _parse_layers(table: Any) -> tuple[LayerRule, ...]:
    """[layers] table (layer name → fragments), in table order."""
    if not isinstance(table, dict) or not table:
        raise ConfigError("[layers] must be a non-empty table")
    rules: list[LayerRule] = []
    for name, fragments in table.items():
        layer = _parse_layer("layers", name)
        patterns = tuple(_string_list(f"layers.{name}", fragments))
        try:
            rules.append(LayerRule(layer, patterns))
        except ValueError as e:
            raise ConfigError(f"[layers]: {e}") from e
    return tuple(rules)


def _parse_binding(table: Any) -> BindingConvention:
    """[binding] table → BindingConvention."""
    if not isinstance(table, dict):
        raise ConfigError("[binding] must be a table")
    options = {key.replace("-", "_"): value for key, value in table.items()}
    for key in ("interface_layer", "implementation_layer"):
        if key in options:
            options[key] = _parse_layer(f"binding.{key}", options[key])
    try:
        return BindingConvention(**options)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"[binding]: {e}") from e


def _parse_checks(value: Any) -> frozenset[FindingCategory]:
    keys = _string_list("disabled_checks", value)
    try:
        return frozenset(FindingCategory.from_key(key) for key in keys)
    except ValueError as e:
        raise ConfigError(str(e)) from e
