"""
Naat Catalogue

Read-only, in-memory collection of naats that searches run against.
Loaded from a JSON export of the backend collection.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from pydantic import ValidationError

from naat_search.exceptions import CatalogError
from naat_search.models import Channel, Naat

logger = logging.getLogger(__name__)


class NaatCatalog:
    def __init__(self, naats: Iterable[Naat] = ()):
        # Tuple snapshot: never mutated after construction
        self._naats: tuple[Naat, ...] = tuple(naats)

    @classmethod
    def from_file(cls, path: str | Path) -> "NaatCatalog":
        """
        Load a catalogue export.

        Accepts either a JSON list of documents or an object with a
        "documents" list (the backend's list response shape).

        Raises:
            CatalogError: file missing, not JSON, or records invalid
        """
        path = Path(path)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise CatalogError(f"Catalogue file not found: {path}") from e
        except json.JSONDecodeError as e:
            raise CatalogError(f"Catalogue file is not valid JSON: {path}") from e

        catalog = cls.from_documents(raw)
        logger.info(f"Loaded {len(catalog)} naats from {path}")
        return catalog

    @classmethod
    def from_documents(cls, raw: Any) -> "NaatCatalog":
        documents = raw.get("documents") if isinstance(raw, dict) else raw
        if not isinstance(documents, list):
            raise CatalogError("Catalogue must be a list of naat documents")

        try:
            naats = [Naat.model_validate(doc) for doc in documents]
        except ValidationError as e:
            raise CatalogError(f"Invalid naat document: {e}") from e
        return cls(naats)

    def __len__(self) -> int:
        return len(self._naats)

    def naats(self, channel_id: str | None = None) -> tuple[Naat, ...]:
        """All naats, or only those of one channel."""
        if channel_id is None:
            return self._naats
        return tuple(n for n in self._naats if n.channel_id == channel_id)

    def channels(self) -> list[Channel]:
        """Distinct channels in first-seen order."""
        seen: dict[str, Channel] = {}
        for naat in self._naats:
            if naat.channel_id and naat.channel_id not in seen:
                seen[naat.channel_id] = Channel(id=naat.channel_id, name=naat.channel_name)
        return list(seen.values())

    def get(self, naat_id: str) -> Naat | None:
        for naat in self._naats:
            if naat.id == naat_id:
                return naat
        return None
