"""Domain-level error types for use-case and adapter mapping.

This module is the home for shared workflow errors that must cross layer
boundaries. Index contract violations are not modelled here; they surface as
plain ``IndexError`` from the list and printer lookups.
"""

from __future__ import annotations

from .entities import WorkflowState
from .ports import UseCaseError


class InvalidTransition(UseCaseError):
    """An input event arrived in a workflow state that cannot consume it."""

    def __init__(self, state: WorkflowState, event: object):
        name = event if isinstance(event, str) else type(event).__name__
        super().__init__(
            "INVALID_TRANSITION",
            f"{name} is not accepted while {state.value}.",
        )
        self.state = state
        self.event = event


class WorkflowNotReady(UseCaseError):
    """Input was dispatched before the catalog finished loading."""

    def __init__(self) -> None:
        super().__init__("WORKFLOW_NOT_READY", "Workflow is still initializing.")


__all__ = ["InvalidTransition", "WorkflowNotReady"]
