from __future__ import annotations

from typing import List

import pytest

from printflow.adapters.catalog_fs import CatalogFs
from printflow.adapters.display_mock import DisplayMock
from printflow.domain.entities import FileOperation, PrintableItem, Printer, WorkflowState
from printflow.domain.errors import InvalidTransition, WorkflowNotReady
from printflow.domain.panel_layout import LEFT_COLUMN, RIGHT_COLUMN
from printflow.domain.ports import UseCaseError
from printflow.usecases.load_catalog import LoadCatalog
from printflow.usecases.print_files_workflow import MENU_TITLE, PrintFilesWorkflow
from printflow.viewmodels.settings_vm import SettingsConfig


class _CatalogStub:
    def __init__(self, items: List[PrintableItem], printers: List[Printer]) -> None:
        self.items = items
        self.printers = printers
        self.loads = 0

    def list_items(self, folder_path: str) -> List[PrintableItem]:
        self.loads += 1
        return list(self.items)

    def list_printers(self, root_path: str) -> List[Printer]:
        return list(self.printers)


class _FailingCatalog:
    def list_items(self, folder_path: str):
        raise PermissionError(13, "Permission denied", folder_path)

    def list_printers(self, root_path: str):
        raise AssertionError("printers must not be listed after a failed item load")


def _items(*specs):
    return [
        PrintableItem(id=i + 1, name=name, source_path=f"/labels/{name}", unit_count=count)
        for i, (name, count) in enumerate(specs)
    ]


def _printers(*names):
    return [Printer(id=i + 1, name=name, source_path=f"/printers/{name}") for i, name in enumerate(names)]


def _workflow(items, printers):
    display = DisplayMock()
    catalog = _CatalogStub(items, printers)
    workflow = PrintFilesWorkflow(LoadCatalog(catalog), display, SettingsConfig(labels_dir="/labels", printers_dir="/printers"))
    workflow.initialize()
    return workflow, display, catalog


def test_end_to_end_route_to_second_printer():
    workflow, display, _ = _workflow(_items(("a.txt", 5), ("b.txt", 3)), _printers("HP", "Canon"))
    assert display.last.file_status == "Found 8 Files"
    assert display.last.queue_status == "Queue Empty"

    workflow.mark(0)
    workflow.accept()
    assert workflow.state is WorkflowState.CHOOSING_OPERATION
    assert display.last.menu.title == MENU_TITLE
    assert display.last.menu.options == ("Select Printer", "Duplicate", "Split", "Delete")

    workflow.choose_operation(FileOperation.ASSIGN_TO_PRINTER)
    assert workflow.state is WorkflowState.CHOOSING_PRINTER
    assert display.last.menu.options == ("HP", "Canon")

    workflow.choose_printer(1)

    snap = display.last
    assert workflow.state is WorkflowState.SELECTING
    assert snap.menu is None
    assert snap.file_status == "Found 3 Files"
    assert [row.name for row in snap.files] == ["b.txt"]
    canon = snap.panel("Canon")
    assert canon is not None
    assert canon.unit_total == 5
    assert canon.label_count_text == "LabelCount: 5"
    assert canon.placement.column == LEFT_COLUMN
    assert [row.name for row in canon.rows] == ["a.txt"]
    assert snap.touched == ("Canon",)
    assert snap.queue_status == ""
    assert workflow.queue_vm.panel("Canon").queue[0].queued is True


def test_first_routed_printer_takes_left_then_right():
    workflow, display, _ = _workflow(_items(("a.txt", 5), ("b.txt", 3)), _printers("HP", "Canon"))
    workflow.mark(0)
    workflow.accept()
    workflow.choose_operation(0)
    workflow.choose_printer(0)
    workflow.mark(0)
    workflow.accept()
    workflow.choose_operation(0)
    workflow.choose_printer(1)

    snap = display.last
    assert snap.panel("HP").placement.column == LEFT_COLUMN
    assert snap.panel("Canon").placement.column == RIGHT_COLUMN
    assert snap.file_status == "Found 0 Files"


def test_column_order_follows_first_routing_not_volume():
    items = _items(*[(f"f{i}.txt", 1) for i in range(6)])
    workflow, display, _ = _workflow(items, _printers("Epson", "HP", "Canon"))
    for printer_index, picks in [(1, [0, 1, 2]), (2, [0]), (1, [0]), (0, [0])]:
        for idx in picks:
            workflow.mark(idx)
        workflow.accept()
        workflow.choose_operation(FileOperation.ASSIGN_TO_PRINTER)
        workflow.choose_printer(printer_index)

    columns = {p.title: p.placement.column for p in display.last.panels}
    assert columns == {"HP": LEFT_COLUMN, "Canon": RIGHT_COLUMN, "Epson": LEFT_COLUMN}
    assert display.last.panel("HP").unit_total == 4


def test_multi_file_route_keeps_selection_order():
    workflow, display, _ = _workflow(
        _items(("a.txt", 1), ("b.txt", 2), ("c.txt", 3), ("d.txt", 4)), _printers("HP")
    )
    for idx in (2, 0, 1):
        workflow.mark(idx)
    workflow.accept()
    workflow.choose_operation(0)
    workflow.choose_printer(0)

    hp = display.last.panel("HP")
    assert [row.name for row in hp.rows] == ["c.txt", "a.txt", "b.txt"]
    assert hp.unit_total == 6
    assert [row.name for row in display.last.files] == ["d.txt"]


@pytest.mark.parametrize("operation", [FileOperation.DELETE, FileOperation.DUPLICATE, FileOperation.SPLIT])
def test_non_assign_operation_changes_nothing(operation):
    workflow, display, _ = _workflow(_items(("a.txt", 5), ("b.txt", 3)), _printers("HP"))
    workflow.mark(0)
    workflow.accept()

    workflow.choose_operation(operation)

    snap = display.last
    assert workflow.state is WorkflowState.SELECTING
    assert workflow.pending_marks == ()
    assert [row.name for row in snap.files] == ["a.txt", "b.txt"]
    assert not any(row.marked for row in snap.files)
    assert snap.panels == ()


def test_empty_accept_stays_selecting():
    workflow, display, _ = _workflow(_items(("a.txt", 5)), _printers("HP"))

    workflow.accept()

    assert workflow.state is WorkflowState.SELECTING
    assert display.last.menu is None


def test_cancel_discards_marks():
    workflow, display, _ = _workflow(_items(("a.txt", 5)), _printers("HP"))
    workflow.mark(0)
    workflow.accept()
    workflow.choose_operation(0)

    workflow.cancel()

    assert workflow.state is WorkflowState.SELECTING
    assert [row.name for row in display.last.files] == ["a.txt"]
    assert display.last.panels == ()


def test_invalid_inputs():
    workflow, _, _ = _workflow(_items(("a.txt", 5)), _printers("HP"))

    with pytest.raises(IndexError):
        workflow.mark(1)
    with pytest.raises(InvalidTransition):
        workflow.choose_printer(0)

    workflow.mark(0)
    workflow.accept()
    with pytest.raises(InvalidTransition):
        workflow.mark(0)
    workflow.choose_operation(0)
    with pytest.raises(IndexError):
        workflow.choose_printer(1)
    assert workflow.state is WorkflowState.CHOOSING_PRINTER

    workflow.choose_printer(0)
    assert workflow.state is WorkflowState.SELECTING


def test_input_before_initialize_is_rejected():
    workflow = PrintFilesWorkflow(
        LoadCatalog(_CatalogStub([], [])), DisplayMock(), SettingsConfig()
    )

    assert workflow.ready is False
    with pytest.raises(WorkflowNotReady):
        workflow.accept()


def test_initialize_is_idempotent_and_emits_loading_first():
    workflow, display, catalog = _workflow(_items(("a.txt", 5)), _printers("HP"))

    workflow.initialize()

    assert catalog.loads == 1
    assert display.snapshots[0].file_status == "Loading Files..."
    assert display.snapshots[1].file_status == "Found 5 Files"


def test_failed_initialize_keeps_workflow_closed():
    display = DisplayMock()
    workflow = PrintFilesWorkflow(LoadCatalog(_FailingCatalog()), display, SettingsConfig())

    with pytest.raises(UseCaseError) as exc_info:
        workflow.initialize()

    assert exc_info.value.code == "CATALOG_LOAD_FAILED"
    assert workflow.ready is False
    with pytest.raises(WorkflowNotReady):
        workflow.mark(0)


def test_sessions_do_not_share_panel_layout():
    first, first_display, _ = _workflow(_items(("a.txt", 1), ("b.txt", 1)), _printers("HP", "Canon"))
    for printer_index in (0, 1):
        first.mark(0)
        first.accept()
        first.choose_operation(0)
        first.choose_printer(printer_index)

    second, second_display, _ = _workflow(_items(("c.txt", 1)), _printers("Canon"))
    second.mark(0)
    second.accept()
    second.choose_operation(0)
    second.choose_printer(0)

    assert first_display.last.panel("Canon").placement.column == RIGHT_COLUMN
    canon = second_display.last.panel("Canon")
    assert canon.placement.column == LEFT_COLUMN
    assert canon.placement.anchor_below is None


def test_filesystem_catalog_end_to_end(tmp_path):
    labels = tmp_path / "labels"
    printers = tmp_path / "printers"
    labels.mkdir()
    printers.mkdir()
    (labels / "only.txt").write_text("1\n2\n3\n", encoding="utf-8")
    (printers / "01-Zebra").mkdir()

    display = DisplayMock()
    workflow = PrintFilesWorkflow(
        LoadCatalog(CatalogFs()),
        display,
        SettingsConfig(labels_dir=str(labels), printers_dir=str(printers)),
    )
    workflow.initialize()
    workflow.mark(0)
    workflow.accept()
    workflow.choose_operation(0)
    workflow.choose_printer(0)

    zebra = display.last.panel("Zebra")
    assert zebra.unit_total == 3
    assert display.last.file_status == "Found 0 Files"
