from __future__ import annotations

import logging
from typing import Dict, Iterable, Mapping, Optional

from .actions import InputAction

logger = logging.getLogger(__name__)


class InputMapper:
    """Rebindable mapping from backend key names to logical actions.

    Key names are matched case-insensitively, so "ArrowUp", "ARROWUP" and
    "arrowup" are the same key. Backends that report other names (or integer
    codes) can register aliases onto the canonical names.

    Example usage:
        mapper = InputMapper.default()
        mapper.translate_key("ArrowLeft")   # -> InputAction.MOVE_LEFT
        mapper.translate_key("space")       # -> InputAction.ACTIVATE
    """

    def __init__(self, bindings: Optional[Mapping[str, InputAction]] = None) -> None:
        self._bindings: Dict[str, InputAction] = {}
        self._aliases: Dict[str, str] = {}
        if bindings:
            for key, action in bindings.items():
                self.bind(key, action)

    @staticmethod
    def _normalize(key: str | int | None) -> Optional[str]:
        if key is None:
            return None
        if isinstance(key, int):
            return str(key)
        if not isinstance(key, str):
            return None
        k = key.strip()
        if not k:
            # The space bar arrives as " " from some backends
            return "SPACE" if key == " " else None
        return k.upper()

    def bind(self, key: str | int, action: InputAction) -> None:
        nk = self._normalize(key)
        if nk is None:
            logger.warning("Attempted to bind invalid key: %r", key)
            return
        self._bindings[nk] = action

    def bind_many(self, keys: Iterable[str | int], action: InputAction) -> None:
        for k in keys:
            self.bind(k, action)

    def unbind(self, key: str | int) -> None:
        nk = self._normalize(key)
        if nk is not None:
            self._bindings.pop(nk, None)

    def set_alias(self, physical: str | int, canonical_name: str) -> None:
        """Register e.g. set_alias("Up", "ArrowUp") or set_alias(32, "Space")."""
        nk = self._normalize(physical)
        cn = self._normalize(canonical_name)
        if nk and cn:
            self._aliases[nk] = cn

    def translate_key(self, key: str | int) -> Optional[InputAction]:
        nk = self._normalize(key)
        if nk is None:
            return None
        return self._bindings.get(self._aliases.get(nk, nk))

    @classmethod
    def from_config(cls, bindings: Mapping[str, Iterable[str]]) -> "InputMapper":
        """Default mapper with per-action overrides, e.g. {"move_up": ["K"]}.

        An action listed here loses its default keys.
        """
        mapper = cls.default()
        for action_name, keys in bindings.items():
            try:
                action = InputAction[action_name.upper()]
            except KeyError:
                logger.warning("Ignoring binding for unknown action: %s", action_name)
                continue
            for bound_key, bound_action in list(mapper._bindings.items()):
                if bound_action is action:
                    del mapper._bindings[bound_key]
            mapper.bind_many(keys, action)
        return mapper

    @classmethod
    def default(cls) -> "InputMapper":
        """Arrow keys and WASD move; Space activates."""
        mapper = cls()

        mapper.bind_many(["ArrowUp", "W"], InputAction.MOVE_UP)
        mapper.bind_many(["ArrowDown", "S"], InputAction.MOVE_DOWN)
        mapper.bind_many(["ArrowLeft", "A"], InputAction.MOVE_LEFT)
        mapper.bind_many(["ArrowRight", "D"], InputAction.MOVE_RIGHT)
        mapper.bind("Space", InputAction.ACTIVATE)

        # Short names used by several windowing toolkits
        for short in ("Up", "Down", "Left", "Right"):
            mapper.set_alias(short, f"Arrow{short}")

        return mapper


__all__ = ["InputMapper"]
