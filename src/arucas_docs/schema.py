"""Documentation file loading utilities."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator

from arucas_docs.models import ClassDoc, SchemaError, parse_class

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Document:
    """Parsed documentation file.

    Entities are mapped to typed records only when iterated, so a schema
    problem in one class surfaces while that class is being rendered.
    """

    raw: dict[str, Any]
    sort_entries: bool = True

    def iter_classes(self) -> Iterator[ClassDoc]:
        """Yield every class of the document as a :class:`ClassDoc`."""
        for _name, value in self._entries("classes"):
            yield parse_class(value)

    def iter_extensions(self) -> Iterator[tuple[str, list[Any]]]:
        """Yield ``(group name, raw function list)`` pairs."""
        for name, value in self._entries("extensions"):
            if not isinstance(value, list):
                raise SchemaError(f"extension '{name}' must be a list of functions")
            yield name, value

    def _entries(self, key: str) -> list[tuple[str, Any]]:
        table = self.raw.get(key)
        if not isinstance(table, dict):
            raise SchemaError(f"document must define object '{key}'")
        entries = list(table.items())
        if self.sort_entries:
            entries.sort(key=lambda item: item[0])
        return entries


def load_document(path: str | Path, *, sort_entries: bool = True) -> Document:
    """Load the documentation tree from *path*.

    Parameters
    ----------
    path:
        Location of the JSON documentation file.
    sort_entries:
        Emit classes and extension groups ordered by name instead of
        document order.
    """
    path = Path(path)
    logger.debug("Reading %s", path)
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise SchemaError("document root must be an object")
    return Document(raw=data, sort_entries=sort_entries)
