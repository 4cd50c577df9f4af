"""Constants for the backend double package.

Canned results for the bundled presets live in YAML files under config/.
"""

from __future__ import annotations

from pathlib import Path

# Package metadata
DOMAIN = "backend_double"

# Presets
DEFAULT_PRESET_ID = "default"
CONFIG_DIR = Path(__file__).parent / "config"
PRESET_CONFIG_FILE = CONFIG_DIR / "presets.yaml"
SUPPORTED_PRESET_VERSION = "1."

# Call-site resolution
# Frames between operation_name() and the operation body calling it
OPERATION_FRAME_DEPTH = 1
ANONYMOUS_FUNCTION_PREFIX = "<"
