"""Preset manager for StubBackend result presets."""

from __future__ import annotations

import copy
import dataclasses
import logging
from pathlib import Path
from typing import Any, Callable, Optional, Union

from .. import config_loader
from ..const import PRESET_CONFIG_FILE
from ..doubles.stub_backend import StubBackend
from ..domain.exceptions import PresetError
from .builtin import BUILTIN_PRESETS
from .result_preset import ResultPreset

_LOGGER = logging.getLogger(__name__)


class PresetManager:
    """Manage result presets for StubBackend.

    Holds the built-in presets shipped with the package plus any presets
    loaded from YAML. Every ``get_preset`` call hands out a fresh preset, so
    applying the same preset to two doubles never shares wallets, chain
    databases or other mutable results between them.
    """

    def __init__(self, config_file: Optional[Path] = PRESET_CONFIG_FILE) -> None:
        """Initialize preset manager.

        Args:
            config_file: YAML file with extra presets; None loads the
                built-in presets only
        """
        self._factories: dict[str, Callable[[], ResultPreset]] = {}
        self._presets: dict[str, ResultPreset] = {}

        self._load_builtin_presets()

        if config_file is not None:
            self.load_presets_from_file(config_file)

    def _load_builtin_presets(self) -> None:
        """Load built-in result presets."""
        for preset_id, factory in BUILTIN_PRESETS.items():
            self._factories[preset_id] = factory
            _LOGGER.debug("Loaded built-in preset: %s", preset_id)

    def load_presets_from_file(self, path: Path) -> list[ResultPreset]:
        """Load presets from a YAML file, replacing presets with the same id.

        Args:
            path: Preset file

        Returns:
            Loaded presets

        Raises:
            PresetError: If the file is invalid or redefines a built-in preset
        """
        presets = config_loader.load_preset_config(path)
        for preset in presets:
            self.add_preset(preset)
        return presets

    def add_preset(self, preset: ResultPreset) -> None:
        """Register a preset under its id.

        Raises:
            PresetError: If the id belongs to a built-in preset
        """
        if preset.id in self._factories:
            raise PresetError(f"Cannot replace built-in preset: {preset.id}")
        if preset.id in self._presets:
            _LOGGER.debug("Replacing preset: %s", preset.id)
        self._presets[preset.id] = preset

    def get_preset(self, preset_id: str) -> ResultPreset:
        """Get a fresh copy of a preset by ID.

        Args:
            preset_id: Preset identifier

        Returns:
            ResultPreset owned by the caller

        Raises:
            PresetError: If the preset is not found
        """
        factory = self._factories.get(preset_id)
        if factory is not None:
            return factory()

        preset = self._presets.get(preset_id)
        if preset is None:
            raise PresetError(f"Preset not found: {preset_id}")
        # Exceptions are shared, mutable results are not
        return dataclasses.replace(
            preset,
            results=copy.deepcopy(preset.results),
            errors=dict(preset.errors),
            failures=dict(preset.failures),
        )

    def list_presets(self) -> list[ResultPreset]:
        """Get all available presets.

        Returns:
            Presets, built-in first, then alphabetically by name
        """
        presets = [factory() for factory in self._factories.values()]
        presets.extend(self._presets.values())
        presets.sort(key=lambda p: (not p.is_builtin, p.name))
        return presets

    def apply(
        self,
        backend: StubBackend,
        preset: Union[str, ResultPreset],
        overrides: Optional[dict[str, tuple[Any, ...]]] = None,
    ) -> ResultPreset:
        """Apply a preset to a stub backend.

        Results are registered first, then errors and failures, so a preset
        may give an operation values and an error at the same time. Every
        value goes through the stub's checked setup API.

        Args:
            backend: Stub to configure
            preset: Preset identifier or preset instance
            overrides: Values replacing the preset's results per operation

        Returns:
            The applied preset

        Raises:
            PresetError: If the preset is not found
            DoubleSetupError: If a value does not fit its operation
        """
        if isinstance(preset, str):
            preset = self.get_preset(preset)

        _LOGGER.info("Applying preset: %s", preset.name)

        results = dict(preset.results)
        if overrides:
            results.update(overrides)
            _LOGGER.debug("Applied overrides: %s", sorted(overrides))

        for name, values in results.items():
            backend.register(name, *values)
        for name, error in preset.errors.items():
            backend.set_error(name, error)
        for name, message in preset.failures.items():
            backend.set_failure(name, message)

        _LOGGER.debug(
            "Preset %s configured %d operation(s)", preset.id, len(preset.operations())
        )
        return preset
