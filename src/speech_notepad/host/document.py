"""File state for the one document a notepad window edits."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from speech_notepad.runtime import telemetry

ENCODING = "utf-8"
UNTITLED = "untitled"


class DocumentError(OSError):
    """Raised when the document cannot be read or written."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class DocumentSession:
    """Tracks the backing path and the last text known to be on disk.

    The buffer itself stays in the host widget; the session only compares
    against the clean text to answer whether there is unsaved work.
    """

    def __init__(self, path: Optional[Path] = None, clean_text: str = "") -> None:
        self.path = path
        self._clean_text = clean_text

    @property
    def title(self) -> str:
        return str(self.path) if self.path is not None else UNTITLED

    def has_unsaved_changes(self, text: str) -> bool:
        return text != self._clean_text

    def new(self) -> str:
        self.path = None
        self._clean_text = ""
        telemetry.record_event("document.new", level="debug")
        return ""

    def open(self, path: str | Path) -> str:
        """Read ``path`` and make it the current document."""

        target = Path(path)
        try:
            text = target.read_text(encoding=ENCODING)
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentError(f"Cannot open {target}: {exc}", path=target) from exc
        self.path = target
        self._clean_text = text
        telemetry.record_event(
            "document.open", data={"path": str(target), "chars": len(text)}
        )
        return text

    def save(self, text: str) -> Path:
        if self.path is None:
            raise DocumentError("Document has no path; use save_as")
        return self.save_as(text, self.path)

    def save_as(self, text: str, path: str | Path) -> Path:
        target = Path(path)
        try:
            target.write_text(text, encoding=ENCODING)
        except OSError as exc:
            raise DocumentError(f"Cannot save {target}: {exc}", path=target) from exc
        self.path = target
        self._clean_text = text
        telemetry.record_event(
            "document.save", data={"path": str(target), "chars": len(text)}
        )
        return target


__all__ = ["DocumentError", "DocumentSession", "UNTITLED"]
