"""Filesystem implementation of :class:`printflow.domain.ports.CatalogPort`.

Files directly inside the labels folder become printable items; each
sub-directory of the printers root becomes a printer. Listing order is the
order ``os.scandir`` yields, never re-sorted.
"""

from __future__ import annotations

import logging
import os
from typing import List

from printflow.domain.entities import PrintableItem, Printer
from printflow.domain.ports import CatalogPort

_log = logging.getLogger(__name__)


def count_lines(path: str, *, encoding: str = "utf-8") -> int:
    """Return the number of lines in ``path``.

    A trailing line break does not start a new line, so ``"a\\nb"`` and
    ``"a\\nb\\n"`` both count 2 and an empty file counts 0. ``\\r\\n`` and
    ``\\r`` are each one break.
    """
    with open(path, "r", encoding=encoding, errors="replace", newline=None) as handle:
        return sum(1 for _ in handle)


def printer_name_from_dir(dir_name: str) -> str:
    """Use the last ``-`` separated token of the folder name (``01-HP`` -> ``HP``)."""
    token = dir_name.split("-")[-1].strip()
    return token or dir_name


class CatalogFs(CatalogPort):
    """Read printable files and printers from local directories."""

    def __init__(self, *, skip_unreadable: bool = False, encoding: str = "utf-8") -> None:
        self.skip_unreadable = skip_unreadable
        self.encoding = encoding

    def list_items(self, folder_path: str) -> List[PrintableItem]:
        items: List[PrintableItem] = []
        with os.scandir(folder_path) as entries:
            for entry in entries:
                if not entry.is_file():
                    continue
                try:
                    unit_count = count_lines(entry.path, encoding=self.encoding)
                except OSError as exc:
                    if not self.skip_unreadable:
                        raise
                    _log.warning("Skipping unreadable file %s: %s", entry.path, exc)
                    continue
                items.append(
                    PrintableItem(
                        id=len(items) + 1,
                        name=entry.name,
                        source_path=entry.path,
                        unit_count=unit_count,
                    )
                )
        _log.debug("Listed %d items in %s", len(items), folder_path)
        return items

    def list_printers(self, root_path: str) -> List[Printer]:
        printers: List[Printer] = []
        with os.scandir(root_path) as entries:
            for entry in entries:
                if not entry.is_dir():
                    continue
                printers.append(
                    Printer(
                        id=len(printers) + 1,
                        name=printer_name_from_dir(entry.name),
                        source_path=entry.path,
                    )
                )
        _log.debug("Listed %d printers in %s", len(printers), root_path)
        return printers


__all__ = ["CatalogFs", "count_lines", "printer_name_from_dir"]
