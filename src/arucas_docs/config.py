"""Configuration for documentation generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

try:
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - python<3.11
    import tomli as tomllib

DEFAULT_INPUT = Path("AllDocs.json")
DEFAULT_CLASSES_OUTPUT = Path("Classes.md")
DEFAULT_EXTENSIONS_OUTPUT = Path("Extensions.md")


class ConfigError(ValueError):
    """Raised for malformed configuration files."""


@dataclass(frozen=True)
class RenderSettings:
    """Options that shape the rendered Markdown."""

    language: str = "Arucas"
    code_fence: str = "kt"
    sort_entries: bool = True


@dataclass(frozen=True)
class DocsConfig:
    """Input/output locations plus render settings."""

    input_path: Path = DEFAULT_INPUT
    classes_output: Path = DEFAULT_CLASSES_OUTPUT
    extensions_output: Path = DEFAULT_EXTENSIONS_OUTPUT
    render: RenderSettings = field(default_factory=RenderSettings)


def load_config(path: str | Path) -> DocsConfig:
    """Load a :class:`DocsConfig` from the TOML file at *path*.

    Relative paths in the file are resolved against the file's directory.
    Missing tables and keys keep their defaults.
    """
    path = Path(path)
    with path.open("rb") as handle:
        raw = tomllib.load(handle)
    base = path.resolve().parent

    input_table = _table(raw, "input")
    output_table = _table(raw, "output")
    render_table = _table(raw, "render")

    defaults = RenderSettings()
    render = RenderSettings(
        language=_string(render_table, "language", "render", defaults.language),
        code_fence=_string(render_table, "code-fence", "render", defaults.code_fence),
        sort_entries=_boolean(render_table, "sort", "render", defaults.sort_entries),
    )
    return DocsConfig(
        input_path=_path(input_table, "path", "input", DEFAULT_INPUT, base),
        classes_output=_path(output_table, "classes", "output", DEFAULT_CLASSES_OUTPUT, base),
        extensions_output=_path(
            output_table, "extensions", "output", DEFAULT_EXTENSIONS_OUTPUT, base
        ),
        render=render,
    )


def _table(raw: dict[str, Any], name: str) -> dict[str, Any]:
    table = raw.get(name, {})
    if not isinstance(table, dict):
        raise ConfigError(f"config {name} must be a table")
    return table


def _string(table: dict[str, Any], key: str, section: str, default: str) -> str:
    value = table.get(key, default)
    if not isinstance(value, str):
        raise ConfigError(f"config {section} {key} must be a string")
    return value


def _boolean(table: dict[str, Any], key: str, section: str, default: bool) -> bool:
    value = table.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"config {section} {key} must be a boolean")
    return value


def _path(table: dict[str, Any], key: str, section: str, default: Path, base: Path) -> Path:
    if key not in table:
        return default
    value = _string(table, key, section, str(default))
    candidate = Path(value)
    return candidate if candidate.is_absolute() else base / candidate
