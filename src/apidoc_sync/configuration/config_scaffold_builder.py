"""Settings scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_SETTINGS_FILENAME = "apidoc-sync.yaml"

_SETTINGS_SCAFFOLD_TEMPLATE = """# Editor settings for apidoc-sync.
# Every value is optional; delete a line to fall back to its default.

editor:
  # Quiet period after the last keystroke before the text is parsed.
  debounce_seconds: 0.5
  # Indentation used when writing JSON documents.
  indent: 2
  # Syntax for new documents and the built-in sample (json or yaml).
  default_format: yaml
"""


def build_placeholder_settings() -> str:
    """Build a settings file with default values and inline guidance."""
    return _SETTINGS_SCAFFOLD_TEMPLATE


def write_placeholder_settings(output_path: Path | str) -> Path:
    """Write the settings scaffold to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Settings file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_settings(), encoding="utf-8")
    return destination.resolve()
