from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ControlSettings:
    speed: float = 175.0
    drag_threshold: float = 10.0
    tap_max_ms: float = 200.0
    activation_reach: float = 4.0
    bindings: Dict[str, List[str]] = field(default_factory=dict)


@dataclass(frozen=True)
class RoomSettings:
    tile_size: int = 32
    base_tile_id: int = 0


@dataclass(frozen=True)
class Settings:
    controls: ControlSettings = field(default_factory=ControlSettings)
    room: RoomSettings = field(default_factory=RoomSettings)

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Could not parse settings file {path}: {exc}") from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Settings file {path} must contain a mapping")
        return data

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @staticmethod
    def _section(data: dict, name: str, target: type) -> Any:
        raw = data.get(name) or {}
        known = {f.name for f in dataclasses.fields(target)}
        unknown = set(raw) - known
        if unknown:
            logger.warning("Ignoring unknown %s settings: %s", name, sorted(unknown))
        return target(**{k: v for k, v in raw.items() if k in known})

    @staticmethod
    def _bindings(raw: Any) -> Dict[str, List[str]]:
        """Normalize ``{action: key | [keys]}``; a lone key name is one binding."""
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise ConfigError("controls.bindings must be a mapping of action to keys")
        bindings: Dict[str, List[str]] = {}
        for action, keys in raw.items():
            if isinstance(keys, str):
                keys = [keys]
            elif not isinstance(keys, list):
                raise ConfigError(f"Binding for '{action}' must be a key name or a list of key names")
            bindings[str(action)] = [str(k) for k in keys]
        return bindings

    @classmethod
    def _from_dict(cls, data: dict) -> "Settings":
        controls = cls._section(data, "controls", ControlSettings)
        controls = dataclasses.replace(controls, bindings=cls._bindings(controls.bindings))
        room = cls._section(data, "room", RoomSettings)
        return Settings(controls=controls, room=room)

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "Settings":
        """Load packaged defaults, overlaid with an optional user YAML file."""
        try:
            text = resources.files("housecrawl.config").joinpath("defaults.yaml").read_text(encoding="utf-8")
            default_data = yaml.safe_load(text) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            default_data = dataclasses.asdict(Settings())

        user_data = {}
        if user_path is not None:
            if user_path.exists():
                user_data = cls._load_yaml(user_path)
                logger.info("Loaded user settings from %s", user_path)
            else:
                logger.warning("User settings file not found: %s", user_path)

        settings = cls._from_dict(cls._deep_merge(default_data, user_data))
        logger.debug("Settings merged: %s", settings)
        return settings

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(dataclasses.asdict(self), f, sort_keys=False)
        logger.info("Saved settings to %s", path)


__all__ = ["ControlSettings", "RoomSettings", "Settings"]
