"""Persisted editor preferences.

The on-disk document is a flat JSON object::

    {"EnableWordWrap": false, "EnableWordByWord": true,
     "VoiceName": "", "FontString": "Consolas, 12pt"}
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional

from speech_notepad.runtime import telemetry

DEFAULT_FONT_FAMILY = "Consolas"
DEFAULT_FONT_SIZE = 12.0
ENCODING = "utf-8"

_FONT_PATTERN = re.compile(r"^\s*(?P<family>[^,]+?)\s*,\s*(?P<size>\d+(?:\.\d+)?)\s*pt\s*$")


class SettingsError(ValueError):
    """Raised when a settings file or font descriptor cannot be parsed."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


@dataclass(frozen=True, slots=True)
class FontDescriptor:
    family: str = DEFAULT_FONT_FAMILY
    size: float = DEFAULT_FONT_SIZE

    def to_string(self) -> str:
        return f"{self.family}, {self.size:g}pt"

    @classmethod
    def parse(cls, raw: str) -> "FontDescriptor":
        match = _FONT_PATTERN.match(raw)
        if match is None:
            raise SettingsError(f"Malformed font descriptor {raw!r}")
        return cls(family=match.group("family"), size=float(match.group("size")))

    def with_size(self, size: float) -> "FontDescriptor":
        return replace(self, size=size)


@dataclass(slots=True)
class EditorSettings:
    word_wrap: bool = False
    word_by_word: bool = True
    voice_name: str = ""
    font: Optional[FontDescriptor] = None

    @property
    def font_size(self) -> float:
        return self.font.size if self.font else DEFAULT_FONT_SIZE

    def set_font_size(self, size: float) -> None:
        self.font = (self.font or FontDescriptor()).with_size(size)

    def clear(self) -> None:
        """Restore every field to its default."""

        defaults = EditorSettings()
        self.word_wrap = defaults.word_wrap
        self.word_by_word = defaults.word_by_word
        self.voice_name = defaults.voice_name
        self.font = defaults.font

    def to_document(self) -> Dict[str, Any]:
        return {
            "EnableWordWrap": self.word_wrap,
            "EnableWordByWord": self.word_by_word,
            "VoiceName": self.voice_name,
            "FontString": self.font.to_string() if self.font else "",
        }

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "EditorSettings":
        defaults = cls()
        font_string = str(document.get("FontString") or "")
        return cls(
            word_wrap=bool(document.get("EnableWordWrap", defaults.word_wrap)),
            word_by_word=bool(document.get("EnableWordByWord", defaults.word_by_word)),
            voice_name=str(document.get("VoiceName") or ""),
            font=FontDescriptor.parse(font_string) if font_string else None,
        )

    @classmethod
    def load(cls, path: str | Path) -> "EditorSettings":
        """Read settings from ``path``; a missing file yields defaults."""

        target = Path(path)
        if not target.exists():
            telemetry.record_event(
                "settings.defaults", level="debug", data={"path": str(target)}
            )
            return cls()

        try:
            document = json.loads(target.read_text(encoding=ENCODING))
        except json.JSONDecodeError as exc:
            raise SettingsError(f"Invalid settings JSON: {exc}", path=target) from exc
        if not isinstance(document, dict):
            raise SettingsError("Settings document must be a JSON object", path=target)

        try:
            settings = cls.from_document(document)
        except SettingsError as exc:
            raise SettingsError(str(exc), path=target) from exc
        telemetry.record_event("settings.load", data={"path": str(target)})
        return settings

    def save(self, path: str | Path) -> None:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(
            json.dumps(self.to_document(), ensure_ascii=False) + "\n",
            encoding=ENCODING,
        )
        telemetry.record_event("settings.save", data={"path": str(target)})


__all__ = ["EditorSettings", "FontDescriptor", "SettingsError"]
