"""JSON-file-backed implementation of CatalogRepository.

Stands in for the managed backend's document store: ``catalogs.json``
and ``items.json`` each hold a list of raw documents.  Malformed item
documents are skipped (and logged) at this boundary; an unreadable file
raises CollaboratorError, like an unreachable backend would.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from storefront.domain.exceptions import CollaboratorError, ValidationError
from storefront.domain.model.catalog import Catalog, CatalogItem
from storefront.domain.repository.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)


class JsonCatalogRepository(CatalogRepository):

    def __init__(self, catalogs_path: Path, items_path: Path) -> None:
        self._catalogs_path = catalogs_path
        self._items_path = items_path
        self._ensure_file(catalogs_path)
        self._ensure_file(items_path)

    # --- CatalogRepository interface ------------------------------------------

    def get_catalog(self, catalog_id: str) -> Catalog | None:
        for raw in self._load_raw(self._catalogs_path):
            if raw.get("id") == catalog_id:
                return Catalog.from_record(raw)
        return None

    def list_items(self, catalog_id: str) -> list[CatalogItem]:
        items: list[CatalogItem] = []
        for raw in self._load_raw(self._items_path):
            if raw.get("catalogId", raw.get("catalog_id")) != catalog_id:
                continue
            try:
                items.append(CatalogItem.from_record(raw))
            except ValidationError as exc:
                logger.warning("Skipping malformed item %r: %s", raw.get("id"), exc)
        return items

    # --- File helpers ---------------------------------------------------------

    @staticmethod
    def _load_raw(path: Path) -> list[dict]:
        try:
            records = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise CollaboratorError(f"Cannot read catalog data from {path}") from exc
        if not isinstance(records, list):
            raise CollaboratorError(f"Catalog data in {path} is not a JSON list")
        return [raw for raw in records if isinstance(raw, dict)]

    @staticmethod
    def _ensure_file(path: Path) -> None:
        if path.exists():
            return
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            raise CollaboratorError(f"Cannot create catalog data file {path}") from exc
