"""Tests for loading documentation files."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from arucas_docs.models import SchemaError
from arucas_docs.schema import load_document


def _write(tmp_path: Path, data) -> Path:
    path = tmp_path / "AllDocs.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_document_sorts_entries_by_default(tmp_path: Path) -> None:
    path = _write(tmp_path, {"classes": {"Zeta": {"name": "Zeta"}, "Alpha": {"name": "Alpha"}}})

    names = [cls.name for cls in load_document(path).iter_classes()]
    unsorted = [cls.name for cls in load_document(path, sort_entries=False).iter_classes()]

    assert names == ["Alpha", "Zeta"]
    assert unsorted == ["Zeta", "Alpha"]


def test_load_document_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_document(tmp_path / "missing.json")


def test_load_document_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "AllDocs.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        load_document(path)


def test_load_document_rejects_non_object_root(tmp_path: Path) -> None:
    with pytest.raises(SchemaError, match="root must be an object"):
        load_document(_write(tmp_path, []))


def test_missing_sections_fail_on_iteration(tmp_path: Path) -> None:
    document = load_document(_write(tmp_path, {"classes": {}}))

    assert list(document.iter_classes()) == []
    with pytest.raises(SchemaError, match="'extensions'"):
        list(document.iter_extensions())


def test_extension_groups_must_be_lists(tmp_path: Path) -> None:
    document = load_document(_write(tmp_path, {"extensions": {"Util": {"name": "f"}}}))
    with pytest.raises(SchemaError, match="extension 'Util'"):
        list(document.iter_extensions())
