from __future__ import annotations

import os
from dataclasses import asdict, dataclass, field, replace
from typing import Any, Callable, Dict, Mapping, Optional

from ..utils.logging import env_requests_debug

ENV_LABELS_DIR = "PRINTFLOW_LABELS_DIR"
ENV_PRINTERS_DIR = "PRINTFLOW_PRINTERS_DIR"


@dataclass(frozen=True)
class SettingsConfig:
    """Typed settings that persist via StorageLocal."""

    labels_dir: str = "./Label_Data_Load"
    printers_dir: str = "./Printers"
    skip_unreadable: bool = False
    debug_logging: bool = field(default_factory=env_requests_debug)


class SettingsVM:
    """Keeps app settings state and validation, no I/O here."""

    def __init__(
        self,
        *,
        config: Optional[SettingsConfig] = None,
        on_save: Optional[Callable[[dict], None]] = None,
    ) -> None:
        self.config = config or SettingsConfig()
        self.on_save = on_save

    # ------------------------------------------------------------------
    # Properties bridging to the typed config
    # ------------------------------------------------------------------
    @property
    def labels_dir(self) -> str:
        return self.config.labels_dir

    @labels_dir.setter
    def labels_dir(self, value: str) -> None:
        self.config = replace(self.config, labels_dir=self._coerce_dir("labels_dir", value))

    @property
    def printers_dir(self) -> str:
        return self.config.printers_dir

    @printers_dir.setter
    def printers_dir(self, value: str) -> None:
        self.config = replace(self.config, printers_dir=self._coerce_dir("printers_dir", value))

    @property
    def skip_unreadable(self) -> bool:
        return self.config.skip_unreadable

    @skip_unreadable.setter
    def skip_unreadable(self, value: bool) -> None:
        self.config = replace(self.config, skip_unreadable=self._coerce_bool(value))

    @property
    def debug_logging(self) -> bool:
        return self.config.debug_logging

    @debug_logging.setter
    def debug_logging(self, value: bool) -> None:
        self.config = replace(self.config, debug_logging=self._coerce_bool(value))

    # ------------------------------------------------------------------
    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply persisted settings to the view-model."""

        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        unknown = set(payload.keys()) - set(SettingsConfig.__annotations__)
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates: Dict[str, Any] = {}
        for cfg_key in SettingsConfig.__annotations__.keys():
            if cfg_key in payload:
                updates[cfg_key] = self._coerce_config_value(cfg_key, payload[cfg_key])

        if updates:
            self.config = replace(self.config, **updates)

    def runtime_config(self, environ: Optional[Mapping[str, str]] = None) -> SettingsConfig:
        """
        Return the config for this run with ``PRINTFLOW_LABELS_DIR`` /
        ``PRINTFLOW_PRINTERS_DIR`` applied. ``self.config`` is left untouched,
        so saving never persists an env override.
        """
        env = os.environ if environ is None else environ
        overrides: Dict[str, str] = {}
        for key, var in (("labels_dir", ENV_LABELS_DIR), ("printers_dir", ENV_PRINTERS_DIR)):
            value = (env.get(var) or "").strip()
            if value:
                overrides[key] = value
        return replace(self.config, **overrides)

    def to_dict(self) -> dict:
        return asdict(self.config)

    def cmd_save(self) -> None:
        if self.on_save:
            self.on_save(self.to_dict())

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _coerce_config_value(self, key: str, raw: Any) -> Any:
        if key in {"labels_dir", "printers_dir"}:
            return self._coerce_dir(key, raw)
        if key in {"skip_unreadable", "debug_logging"}:
            return self._coerce_bool(raw)
        raise ValueError(f"Unhandled config field: {key}")

    @staticmethod
    def _coerce_dir(name: str, value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError(f"{name} must be a string path.")
        normalized = value.strip()
        if not normalized:
            raise ValueError(f"{name} must not be empty.")
        return normalized

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)


def default_settings_payload() -> dict:
    """Return a fresh snapshot containing the default settings payload."""
    return SettingsVM().to_dict()
