"""Configuration loader for result presets defined in YAML."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

import voluptuous as vol
import yaml

from .const import PRESET_CONFIG_FILE, SUPPORTED_PRESET_VERSION
from .domain.exceptions import BackendError, PresetError
from .domain.helpers.type_projection import coerce, conforms, describe
from .domain.interfaces import IBackend
from .infrastructure.operation_catalogue import OperationSpec, build_catalogue
from .presets.result_preset import ResultPreset

_LOGGER = logging.getLogger(__name__)

PRESET_SCHEMA = vol.Schema(
    {
        vol.Required("id"): vol.All(str, vol.Length(min=1)),
        vol.Required("name"): vol.All(str, vol.Length(min=1)),
        vol.Optional("description", default=""): str,
        vol.Optional("results", default=dict): {str: list},
        vol.Optional("errors", default=dict): {str: vol.All(str, vol.Length(min=1))},
        vol.Optional("failures", default=dict): {str: vol.All(str, vol.Length(min=1))},
    }
)

CONFIG_SCHEMA = vol.Schema(
    {
        vol.Required("version"): vol.Coerce(str),
        vol.Required("presets"): [PRESET_SCHEMA],
    }
)


def load_preset_config(path: Optional[Path] = None) -> list[ResultPreset]:
    """Load and validate result presets from YAML.

    Args:
        path: Preset file (default: the bundled config/presets.yaml)

    Returns:
        Presets with values converted to the declared result types

    Raises:
        PresetError: If the file is missing, not valid YAML, has an
            unsupported version, or does not fit the backend interface
    """
    config_file = Path(path) if path is not None else PRESET_CONFIG_FILE

    if not config_file.exists():
        raise PresetError(f"Preset file not found: {config_file}")

    try:
        config = yaml.safe_load(config_file.read_text(encoding="utf-8"))
    except yaml.YAMLError as err:
        raise PresetError(f"Invalid YAML in {config_file}: {err}") from err

    if not config:
        raise PresetError(f"Preset file is empty: {config_file}")

    presets = parse_preset_config(config, source=str(config_file))

    _LOGGER.info("Loaded %d preset(s) from %s", len(presets), config_file)
    return presets


def parse_preset_config(config: Mapping[str, Any], source: str = "<config>") -> list[ResultPreset]:
    """Validate an already loaded preset document.

    Args:
        config: Parsed document with ``version`` and ``presets``
        source: Name used in error messages

    Returns:
        Presets with values converted to the declared result types

    Raises:
        PresetError: If the document is invalid
    """
    try:
        config = CONFIG_SCHEMA(dict(config))
    except vol.Invalid as err:
        raise PresetError(f"Invalid preset configuration in {source}: {err}") from err

    version = config["version"]
    if not version.startswith(SUPPORTED_PRESET_VERSION):
        raise PresetError(
            f"Preset configuration version {version} not supported. "
            f"Only version {SUPPORTED_PRESET_VERSION}x is supported."
        )

    catalogue = build_catalogue(IBackend)
    seen: set[str] = set()
    presets = []
    for raw in config["presets"]:
        if raw["id"] in seen:
            raise PresetError(f"Duplicate preset id {raw['id']!r} in {source}")
        seen.add(raw["id"])
        presets.append(_build_preset(raw, catalogue))
    return presets


def _spec_for(preset_id: str, name: str, catalogue: Mapping[str, OperationSpec]) -> OperationSpec:
    spec = catalogue.get(name)
    if spec is None:
        raise PresetError(f"Preset {preset_id!r}: unknown operation {name!r}")
    return spec


def _coerce_values(preset_id: str, spec: OperationSpec, values: list[Any]) -> tuple[Any, ...]:
    if not spec.is_streaming and len(values) != spec.arity:
        raise PresetError(
            f"Preset {preset_id!r}: operation {spec.name!r} declares "
            f"{spec.arity} result(s), got {len(values)}"
        )

    converted = []
    for position, value in enumerate(values):
        declared = spec.expected_type(position)
        try:
            item = coerce(value, declared)
        except ValueError as err:
            raise PresetError(
                f"Preset {preset_id!r}: operation {spec.name!r} result {position}: {err}"
            ) from err
        if not conforms(item, declared):
            raise PresetError(
                f"Preset {preset_id!r}: operation {spec.name!r} result {position} "
                f"must be {describe(declared)}, got {value!r}"
            )
        converted.append(item)
    return tuple(converted)


def _build_preset(raw: dict[str, Any], catalogue: Mapping[str, OperationSpec]) -> ResultPreset:
    preset_id = raw["id"]

    results = {}
    for name, values in raw["results"].items():
        spec = _spec_for(preset_id, name, catalogue)
        results[name] = _coerce_values(preset_id, spec, values)

    errors = {}
    for name, message in raw["errors"].items():
        spec = _spec_for(preset_id, name, catalogue)
        if not spec.fallible:
            raise PresetError(
                f"Preset {preset_id!r}: operation {name!r} has no error channel"
            )
        errors[name] = BackendError(message)

    for name in raw["failures"]:
        _spec_for(preset_id, name, catalogue)

    _LOGGER.debug(
        "Parsed preset %s: %d result(s), %d error(s), %d failure(s)",
        preset_id,
        len(results),
        len(errors),
        len(raw["failures"]),
    )

    return ResultPreset(
        id=preset_id,
        name=raw["name"],
        description=raw["description"],
        results=results,
        errors=errors,
        failures=dict(raw["failures"]),
    )
