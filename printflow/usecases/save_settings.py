from __future__ import annotations
from dataclasses import dataclass
from typing import Dict
from ..domain.ports import StoragePort, UseCaseError


@dataclass
class SaveSettings:
    storage: StoragePort

    def __call__(self, payload: Dict) -> None:
        try:
            self.storage.save_user_settings(payload)
        except Exception as e:
            raise UseCaseError("SAVE_SETTINGS_FAILED", str(e))
