"""Factory for ready-to-use stub backends."""

from __future__ import annotations

import logging
from typing import Optional, Union

from .const import DEFAULT_PRESET_ID
from .doubles.stub_backend import StubBackend
from .presets import PresetManager, ResultPreset

_LOGGER = logging.getLogger(__name__)


def create_stub_backend(
    preset: Union[str, ResultPreset, None] = DEFAULT_PRESET_ID,
    manager: Optional[PresetManager] = None,
) -> StubBackend:
    """Create a StubBackend with a preset applied.

    Args:
        preset: Preset id or instance; None returns a stub with nothing
            configured
        manager: Preset source (default: built-in and bundled presets)

    Returns:
        Configured stub backend

    Raises:
        PresetError: If the preset is not found

    Example:
        >>> backend = create_stub_backend()
        >>> backend.get_td(to_hash(1))
        1
        >>> bare = create_stub_backend(preset=None)
        >>> bare.unconfigured() == sorted(bare.catalogue)
        True
    """
    backend = StubBackend()
    if preset is None:
        return backend

    if manager is None:
        manager = PresetManager()
    applied = manager.apply(backend, preset)
    _LOGGER.debug("Created stub backend with preset %s", applied.id)
    return backend
