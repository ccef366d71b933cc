"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from arucas_docs.config import ConfigError, DocsConfig, load_config


def test_load_config_reads_tables(tmp_path: Path) -> None:
    config_path = tmp_path / "arucas-docs.toml"
    config_path.write_text(
        "\n".join(
            [
                "[input]",
                'path = "docs/AllDocs.json"',
                "[output]",
                'classes = "out/Classes.md"',
                "[render]",
                'code-fence = "arucas"',
                "sort = false",
            ]
        ),
        encoding="utf-8",
    )

    config = load_config(config_path)

    base = tmp_path.resolve()
    assert config.input_path == base / "docs" / "AllDocs.json"
    assert config.classes_output == base / "out" / "Classes.md"
    assert config.extensions_output == Path("Extensions.md")
    assert config.render.code_fence == "arucas"
    assert config.render.language == "Arucas"
    assert config.render.sort_entries is False


def test_load_config_empty_file_keeps_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "empty.toml"
    config_path.write_text("", encoding="utf-8")

    assert load_config(config_path) == DocsConfig()


def test_load_config_rejects_wrong_types(tmp_path: Path) -> None:
    config_path = tmp_path / "bad.toml"
    config_path.write_text("[render]\nsort = \"yes\"\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="render sort must be a boolean"):
        load_config(config_path)
