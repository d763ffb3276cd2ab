"""EPDLibrary — a local collection of EPD records loaded from JSON.

A library file holds either a list of EPD records or an object with an
``"epds"`` list.  Each record is validated against
:class:`~aeclca.models.epd.EnvironmentalProductDeclaration`; invalid
records are skipped with a warning.

Usage::

    library = EPDLibrary.from_path("epds/")
    epd = library.get("Ready-mix concrete C30/37")
    epd = library.find_for_material("Concrete")
"""

from __future__ import annotations

import json
import logging
import tempfile
from pathlib import Path
from typing import Any, Iterable

from pydantic import ValidationError

from aeclca.models.epd import EnvironmentalProductDeclaration

logger = logging.getLogger(__name__)


class EPDLibrary:
    """In-memory EPD lookup by name or id."""

    def __init__(self, epds: Iterable[EnvironmentalProductDeclaration] = ()) -> None:
        self._by_name: dict[str, EnvironmentalProductDeclaration] = {}
        self._by_id: dict[str, EnvironmentalProductDeclaration] = {}
        for epd in epds:
            self.add(epd)

    @classmethod
    def from_path(cls, path: str | Path) -> EPDLibrary:
        library = cls()
        library.load(path)
        return library

    # -- persistence ----------------------------------------------------------

    def load(self, path: str | Path) -> int:
        """Load records from a JSON file or every ``*.json`` in a directory.

        Returns the number of records added.
        """
        path = Path(path)
        files = sorted(path.glob("*.json")) if path.is_dir() else [path]

        added = 0
        for file in files:
            data = json.loads(file.read_text(encoding="utf-8"))
            for record in _records(data):
                try:
                    epd = EnvironmentalProductDeclaration.model_validate(record)
                except ValidationError as exc:
                    logger.warning("Skipping invalid EPD record in %s: %s", file, exc)
                    continue
                self.add(epd)
                added += 1

        logger.info("Loaded %d EPD records from %s", added, path)
        return added

    def save(self, path: str | Path) -> None:
        """Atomically write all records to *path* as JSON."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"epds": [e.model_dump(mode="json") for e in self._by_name.values()]}

        fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=".epds_", suffix=".json")
        try:
            with open(fd, "w", encoding="utf-8") as fh:
                json.dump(payload, fh, indent=2)
            Path(tmp).replace(path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

    # -- lookup ---------------------------------------------------------------

    def add(self, epd: EnvironmentalProductDeclaration) -> None:
        """Add *epd*, replacing any record with the same name or id."""
        for old in (self._by_name.get(epd.name.lower()), self._by_id.get(epd.id)):
            if old is not None:
                self._by_name.pop(old.name.lower(), None)
                self._by_id.pop(old.id, None)

        self._by_name[epd.name.lower()] = epd
        if epd.id:
            self._by_id[epd.id] = epd

    def get(self, key: str) -> EnvironmentalProductDeclaration | None:
        """Look up by exact id, then by case-insensitive name."""
        return self._by_id.get(key) or self._by_name.get(key.lower())

    def find_for_material(self, material_name: str) -> EnvironmentalProductDeclaration | None:
        """Return the EPD best matching a material name.

        Exact (case-insensitive) name match first, then the longest EPD
        name contained in the material name.
        """
        if not material_name:
            return None
        wanted = material_name.lower()
        exact = self._by_name.get(wanted)
        if exact is not None:
            return exact

        candidates = [name for name in self._by_name if name and name in wanted]
        if not candidates:
            return None
        return self._by_name[max(candidates, key=len)]

    def names(self) -> list[str]:
        return [epd.name for epd in self._by_name.values()]

    def __len__(self) -> int:
        return len(self._by_name)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None


def _records(data: Any) -> list[Any]:
    if isinstance(data, dict):
        data = data.get("epds", [])
    if not isinstance(data, list):
        return []
    return data
