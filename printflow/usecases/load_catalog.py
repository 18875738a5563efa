from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from ..domain.entities import PrintableItem, Printer
from ..domain.ports import CatalogPort, UseCaseError

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogSnapshot:
    """Everything the workflow needs before it starts accepting input."""
    items: Tuple[PrintableItem, ...]
    printers: Tuple[Printer, ...]


@dataclass
class LoadCatalog:
    catalog: CatalogPort

    def __call__(self, labels_dir: str, printers_dir: str) -> CatalogSnapshot:
        """Load files and printers once; any read failure aborts the load."""
        try:
            items = self.catalog.list_items(labels_dir)
            printers = self.catalog.list_printers(printers_dir)
        except OSError as exc:
            raise UseCaseError("CATALOG_LOAD_FAILED", str(exc)) from exc
        _log.info(
            "Loaded %d files from %s and %d printers from %s",
            len(items),
            labels_dir,
            len(printers),
            printers_dir,
        )
        return CatalogSnapshot(items=tuple(items), printers=tuple(printers))
