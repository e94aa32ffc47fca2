"""Normalized input events passed from hosts to the dictation controller."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

_KEY_ALIASES = {
    " ": "SPACE",
    "\t": "TAB",
    "\n": "ENTER",
    "\r": "ENTER",
    "return": "ENTER",
}


@dataclass(slots=True)
class KeyInput:
    """Normalized key event."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    @classmethod
    def from_host(
        cls, key: str, *, text: Optional[str] = None, modifiers: Tuple[str, ...] = ()
    ) -> "KeyInput":
        normalized = _KEY_ALIASES.get(key, _KEY_ALIASES.get(key.lower(), key))
        if len(normalized) > 1:
            normalized = normalized.upper()
        return cls(
            key=normalized,
            text=text,
            modifiers=tuple(str(mod).upper() for mod in modifiers),
        )

    @property
    def token(self) -> str:
        if self.modifiers:
            return f"{'+'.join(self.modifiers)}+{self.key}"
        return self.key


__all__ = ["KeyInput"]
