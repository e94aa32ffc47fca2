"""UI-agnostic controller that turns editor events into speech and zoom."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from speech_notepad.buffer import TextSnapshot, selection_span
from speech_notepad.fonts import FontStepper, StepDirection, StepResult
from speech_notepad.runtime import telemetry
from speech_notepad.segments import (
    EMPTY_SPAN,
    Span,
    find_sentence,
    is_boundary_key,
    on_boundary_key,
)
from speech_notepad.settings import EditorSettings

from .events import KeyInput

_CHORD_MODIFIERS = frozenset({"CTRL", "ALT", "META"})


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class DictationHooks:
    """Callbacks the controller uses to reach the host's collaborators."""

    speak: Callable[[str], None]
    cancel_speech: Callable[[], None] = _noop
    # Ask the host widget to select a span (speak-paragraph auto-selection)
    select: Callable[[Span], None] = _noop
    apply_font_size: Callable[[float], None] = _noop
    set_voice: Callable[[str], None] = _noop
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class DictationController:
    """Owns the dictation preferences and the font throttle for one editor.

    Every method takes an explicit :class:`TextSnapshot`; the controller
    never holds on to buffer text between calls.
    """

    def __init__(
        self,
        hooks: DictationHooks,
        *,
        settings: Optional[EditorSettings] = None,
        stepper: Optional[FontStepper] = None,
    ) -> None:
        self.hooks = hooks
        self.settings = settings or EditorSettings()
        self.stepper = stepper or FontStepper()
        self.logger = telemetry.get_logger("speech_notepad.host")

    @property
    def word_by_word(self) -> bool:
        return self.settings.word_by_word

    def handle_key(self, key: KeyInput, snapshot: TextSnapshot) -> Span:
        """React to a keystroke seen *before* its character is inserted.

        Returns the span that was spoken, or an empty span.
        """

        if not self.settings.word_by_word or not is_boundary_key(key.key):
            return EMPTY_SPAN
        if _CHORD_MODIFIERS.intersection(key.modifiers):
            return EMPTY_SPAN

        with telemetry.span(
            "dictation::boundary_key",
            component="dictation",
            metadata={"key": key.token},
        ) as handle:
            span = on_boundary_key(snapshot.text, snapshot.cursor.selection_start)
            handle.add_metadata("span", (span.start, span.length))

        self._log_state("key ->", key=key.token, span=span)
        self._speak(span.extract(snapshot.text), source="word")
        return span

    def speak_paragraph(self, snapshot: TextSnapshot) -> Span:
        """Speak the selection, or select and speak the sentence at the caret."""

        if snapshot.cursor.has_selection:
            span = selection_span(snapshot)
        else:
            span = find_sentence(snapshot.text, snapshot.cursor.selection_start, 0)
            if not span.is_empty:
                self.hooks.select(span)

        self._log_state("paragraph ->", span=span)
        self._speak(span.extract(snapshot.text), source="paragraph")
        return span

    def speak_all(self, snapshot: TextSnapshot) -> Span:
        span = Span(0, len(snapshot.text))
        self._speak(snapshot.text, source="all")
        return span

    def stop(self) -> None:
        self.hooks.cancel_speech()
        telemetry.record_event("speech.cancel", level="debug")
        self.hooks.update_status("speech stopped")

    def toggle_word_by_word(self) -> bool:
        self.settings.word_by_word = not self.settings.word_by_word
        state = "on" if self.settings.word_by_word else "off"
        self.hooks.update_status(f"word-by-word {state}")
        return self.settings.word_by_word

    def toggle_word_wrap(self) -> bool:
        self.settings.word_wrap = not self.settings.word_wrap
        state = "on" if self.settings.word_wrap else "off"
        self.hooks.update_status(f"word wrap {state}")
        return self.settings.word_wrap

    def select_voice(self, name: str) -> None:
        self.hooks.set_voice(name)
        self.settings.voice_name = name
        telemetry.record_event("speech.voice", data={"voice": name})
        self.hooks.update_status(f"voice: {name}")

    def zoom(
        self,
        direction: StepDirection,
        *,
        current_size: Optional[float] = None,
        now: Optional[float] = None,
    ) -> StepResult:
        """Step the font size; the display is only touched on ``APPLIED``."""

        size = self.settings.font_size if current_size is None else current_size
        result = self.stepper.step(size, direction, now=now)
        self._log_state(
            "zoom ->", direction=direction.value, status=result.status.value
        )
        if result.applied:
            self.settings.set_font_size(result.size)
            self.hooks.apply_font_size(result.size)
            self.hooks.update_status(f"font {result.size:g}pt")
            telemetry.record_event(
                "font.step", level="debug", data={"size": result.size}
            )
        return result

    def _speak(self, text: str, *, source: str) -> None:
        if not text.strip():
            return
        self.hooks.speak(text)
        telemetry.record_event(
            "speech.speak",
            level="debug",
            data={"source": source, "chars": len(text)},
        )

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {
            "word_by_word": self.settings.word_by_word,
            "font_size": self.settings.font_size,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))


__all__ = ["DictationController", "DictationHooks"]
