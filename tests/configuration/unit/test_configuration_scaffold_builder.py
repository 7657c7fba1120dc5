"""Settings scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from apidoc_sync.configuration.config_scaffold_builder import (
    build_placeholder_settings,
    write_placeholder_settings,
)
from apidoc_sync.configuration.loader import load_settings
from apidoc_sync.configuration.runtime_settings import EditorSettings


def test_build_placeholder_settings_lists_every_editor_option() -> None:
    scaffold = build_placeholder_settings()

    assert "editor:" in scaffold
    assert "debounce_seconds:" in scaffold
    assert "indent:" in scaffold
    assert "default_format:" in scaffold


def test_written_scaffold_loads_as_default_settings(tmp_path: Path) -> None:
    output_path = tmp_path / "apidoc-sync.yaml"

    written_path = write_placeholder_settings(output_path)

    assert written_path == output_path.resolve()
    assert load_settings(written_path) == EditorSettings()


def test_write_placeholder_settings_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "apidoc-sync.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError, match="already exists"):
        write_placeholder_settings(output_path)
