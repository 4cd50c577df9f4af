"""Pytest configuration and fixtures for backend double tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Add parent directory to Python path so we can import backend_double
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from backend_double import StubBackend, create_stub_backend
from backend_double.presets import PresetManager


@pytest.fixture
def backend() -> StubBackend:
    """Return a stub backend with nothing configured."""
    return StubBackend()


@pytest.fixture
def default_backend() -> StubBackend:
    """Return a stub backend with the default preset applied."""
    return create_stub_backend(manager=PresetManager(config_file=None))


@pytest.fixture
def preset_manager() -> PresetManager:
    """Return a preset manager with built-in and bundled presets."""
    return PresetManager()


@pytest.fixture
def preset_file(tmp_path: Path):
    """Write a preset YAML document and return its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "presets.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
