from __future__ import annotations
from dataclasses import dataclass
from typing import Dict
from ..domain.ports import StoragePort, UseCaseError


@dataclass
class LoadSettings:
    storage: StoragePort

    def __call__(self) -> Dict:
        """Return the persisted settings payload, ``{}`` when none was saved."""
        try:
            payload = self.storage.load_user_settings()
        except Exception as e:
            raise UseCaseError("LOAD_SETTINGS_FAILED", str(e))
        if payload is None:
            return {}
        if not isinstance(payload, dict):
            raise UseCaseError("LOAD_SETTINGS_FAILED", "Settings file must contain an object.")
        return payload
