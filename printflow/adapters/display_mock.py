from __future__ import annotations
from typing import List, Optional
from printflow.domain.ports import DisplayPort
from printflow.viewmodels.snapshots import WorkflowSnapshot


class DisplayMock(DisplayPort):
    """In-memory display that records snapshots; used for tests and headless runs."""

    def __init__(self) -> None:
        self.snapshots: List[WorkflowSnapshot] = []

    def render(self, snapshot: WorkflowSnapshot) -> None:
        self.snapshots.append(snapshot)

    @property
    def last(self) -> Optional[WorkflowSnapshot]:
        return self.snapshots[-1] if self.snapshots else None
