from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Mapping

from ..utils.logging import env_requests_debug

DEFAULT_CARD_TITLE = "My Title"
DEFAULT_CARD_BODY = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod "
    "tempor incididunt ut labore et dolore magna aliqua."
)


@dataclass
class SettingsConfig:
    """Typed window and content settings for the tutorial app."""

    window_title: str = "Jetpack Compose Tutorial"
    geometry: str = "480x320"
    card_title: str = DEFAULT_CARD_TITLE
    card_body: str = DEFAULT_CARD_BODY


def _default_debug_logging() -> bool:
    return env_requests_debug()


class SettingsVM:
    """Keeps app settings state and validation, no I/O here."""

    def __init__(self, *, config: SettingsConfig | None = None) -> None:
        self.config = config or SettingsConfig()
        self.debug_logging: bool = _default_debug_logging()

    @property
    def window_title(self) -> str:
        return self.config.window_title

    @property
    def geometry(self) -> str:
        return self.config.geometry

    @property
    def card_title(self) -> str:
        return self.config.card_title

    @property
    def card_body(self) -> str:
        return self.config.card_body

    # ------------------------------------------------------------------
    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply flat settings overrides to the view-model."""
        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        allowed = {*SettingsConfig.__annotations__.keys(), "debug_logging"}
        unknown = set(payload.keys()) - allowed
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates: Dict[str, Any] = {}
        for cfg_key in SettingsConfig.__annotations__.keys():
            if cfg_key in payload:
                updates[cfg_key] = self._coerce_str(cfg_key, payload[cfg_key])
        if "geometry" in updates:
            self._validate_geometry(updates["geometry"])
        if updates:
            self.config = replace(self.config, **updates)

        if "debug_logging" in payload:
            self.debug_logging = self._coerce_bool(payload["debug_logging"])

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self.config)
        payload["debug_logging"] = bool(self.debug_logging)
        return payload

    # ------------------------------------------------------------------
    @staticmethod
    def _coerce_str(key: str, value: Any) -> str:
        if value is None:
            raise ValueError(f"Setting '{key}' must not be empty.")
        text = str(value).strip()
        if not text:
            raise ValueError(f"Setting '{key}' must not be empty.")
        return text

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)

    @staticmethod
    def _validate_geometry(value: str) -> None:
        width, sep, height = value.partition("x")
        if not sep or not width.isdigit() or not height.isdigit():
            raise ValueError(f"Invalid geometry '{value}', expected WIDTHxHEIGHT.")


__all__ = ["DEFAULT_CARD_BODY", "DEFAULT_CARD_TITLE", "SettingsConfig", "SettingsVM"]
