"""Executable Textual notepad that speaks as you type."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Callable, Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.widgets import Footer, Header, Static, TextArea
    from textual.widgets.text_area import Selection
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use speech_notepad.adapters.textual.app"
    ) from exc

from speech_notepad.adapters.speech import PyttsxSpeechSink
from speech_notepad.buffer import CursorState, SpeechUnavailableError, TextSnapshot
from speech_notepad.fonts import StepDirection
from speech_notepad.host import (
    DictationController,
    DictationHooks,
    DocumentError,
    DocumentSession,
    KeyInput,
)
from speech_notepad.runtime import telemetry
from speech_notepad.segments import Span
from speech_notepad.settings import EditorSettings, SettingsError

from .dialogs import ConfirmScreen, PathScreen, VoiceScreen

DEFAULT_SETTINGS_PATH = Path.home() / ".speech_notepad" / "settings.json"
DISCARD_QUESTION = "Do you want to discard unsaved text?"


class SpeakingTextArea(TextArea):
    """TextArea that reports boundary keys before they are inserted."""

    def __init__(self, text: str = "", **kwargs) -> None:
        super().__init__(text, tab_behavior="indent", **kwargs)
        self.controller: DictationController | None = None

    def snapshot(self) -> TextSnapshot:
        anchor = self.document.get_index_from_location(self.selection.start)
        active = self.document.get_index_from_location(self.selection.end)
        return TextSnapshot(text=self.text, cursor=CursorState.between(anchor, active))

    def select_span(self, span: Span) -> None:
        start = self.document.get_location_from_index(span.start)
        end = self.document.get_location_from_index(span.end)
        self.selection = Selection(start, end)

    async def _on_key(self, event: events.Key) -> None:
        if self.controller is not None:
            modifiers = tuple(
                name
                for name, held in (
                    ("CTRL", "ctrl+" in event.key),
                    ("ALT", "alt+" in event.key),
                )
                if held
            )
            key = KeyInput.from_host(
                event.key.rsplit("+", 1)[-1], text=event.character, modifiers=modifiers
            )
            self.controller.handle_key(key, self.snapshot())
        await super()._on_key(event)

    def on_mouse_scroll_up(self, event: events.MouseScrollUp) -> None:
        if event.ctrl and self.controller is not None:
            self.controller.zoom(StepDirection.LARGER)
            event.stop()

    def on_mouse_scroll_down(self, event: events.MouseScrollDown) -> None:
        if event.ctrl and self.controller is not None:
            self.controller.zoom(StepDirection.SMALLER)
            event.stop()


class SpeechNotepadApp(App[None]):
    """Minimal Textual notepad embedding the dictation controller."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#editor {
		height: 1fr;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("f5", "speak_paragraph", "Speak paragraph"),
        ("f6", "speak_all", "Speak all"),
        ("escape", "stop_speech", "Stop"),
        ("f7", "toggle_word_by_word", "Word-by-word"),
        ("f8", "toggle_word_wrap", "Wrap"),
        ("f9", "choose_voice", "Voice"),
        ("ctrl+up", "zoom_in", "Larger"),
        ("ctrl+down", "zoom_out", "Smaller"),
        ("ctrl+n", "new", "New"),
        ("ctrl+o", "open", "Open"),
        ("ctrl+s", "save", "Save"),
        ("f12", "save_as", "Save as"),
        Binding("ctrl+q", "request_quit", "Quit", priority=True),
    ]

    def __init__(
        self,
        *,
        path: Optional[Path] = None,
        settings_path: Path = DEFAULT_SETTINGS_PATH,
        speech: bool = True,
    ) -> None:
        super().__init__()
        self.document = DocumentSession(path)
        self.settings_path = settings_path
        self.settings = EditorSettings.load(settings_path)
        self._speech_enabled = speech
        self._sink: PyttsxSpeechSink | None = None
        self._editor: SpeakingTextArea | None = None
        self._status: Static | None = None
        self._startup_error: Optional[str] = None
        self.controller: DictationController | None = None
        self.logger = telemetry.get_logger("speech_notepad.app")

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        text = ""
        path = self.document.path
        if path is not None and path.exists():
            try:
                text = self.document.open(path)
            except DocumentError as exc:
                self._startup_error = str(exc)
        self._editor = SpeakingTextArea(
            text, id="editor", soft_wrap=self.settings.word_wrap
        )
        yield self._editor
        self._status = Static("", id="status-line")
        yield self._status
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_title()
        self.sub_title = f"{self.settings.font_size:g}pt"
        hooks = DictationHooks(
            speak=self._speak,
            cancel_speech=self._cancel_speech,
            select=self._select,
            apply_font_size=self._apply_font_size,
            set_voice=self._set_voice,
            update_status=self._update_status,
            log=self.logger.debug,
        )
        self.controller = DictationController(hooks, settings=self.settings)
        if self._editor is not None:
            self._editor.controller = self.controller
            self._editor.focus()
        self._start_speech()
        if self._startup_error:
            self._update_status(self._startup_error)

    def on_unmount(self) -> None:
        if self._sink is not None:
            self._sink.close()
            self._sink = None
        self.settings.save(self.settings_path)

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self._refresh_title()

    def _refresh_title(self) -> None:
        marker = "*" if self._is_dirty() else ""
        self.title = f"{marker}{self.document.title}"

    def _is_dirty(self) -> bool:
        if self._editor is None:
            return False
        return self.document.has_unsaved_changes(self._editor.text)

    def _start_speech(self) -> None:
        if not self._speech_enabled:
            self._update_status("speech disabled")
            return
        sink = PyttsxSpeechSink(voice_name=self.settings.voice_name)
        try:
            sink.start()
        except SpeechUnavailableError as exc:
            self.logger.warning(str(exc))
            self._update_status("speech unavailable")
            return
        self._sink = sink
        voices = sink.voices()
        self._update_status(f"ready ({len(voices)} voices)")

    def _with_sink(self, call: Callable[[PyttsxSpeechSink], None]) -> None:
        if self._sink is None:
            return
        try:
            call(self._sink)
        except SpeechUnavailableError as exc:
            self.logger.warning(str(exc))
            self._sink.close()
            self._sink = None
            self._update_status("speech unavailable")

    def _speak(self, text: str) -> None:
        self._with_sink(lambda sink: sink.speak(text))
        self.logger.debug(f"speak {text!r}")

    def _cancel_speech(self) -> None:
        self._with_sink(lambda sink: sink.cancel())

    def _set_voice(self, name: str) -> None:
        self._with_sink(lambda sink: sink.set_voice(name))

    def _select(self, span: Span) -> None:
        if self._editor is not None:
            self._editor.select_span(span)

    def _apply_font_size(self, size: float) -> None:
        # A terminal cannot resize glyphs; the size is kept for the settings.
        self.sub_title = f"{size:g}pt"

    def _update_status(self, status: str) -> None:
        if self._status is not None:
            self._status.update(status)

    def _snapshot(self) -> Optional[TextSnapshot]:
        if self._editor is None:
            return None
        return self._editor.snapshot()

    def _guard_unsaved(self, continuation: Callable[[], None]) -> None:
        """Run ``continuation`` now, or after the user agrees to lose edits."""

        if not self._is_dirty():
            continuation()
            return

        def decided(discard: bool | None) -> None:
            if discard:
                continuation()

        self.push_screen(ConfirmScreen(DISCARD_QUESTION), decided)

    def _load(self, text: str) -> None:
        if self._editor is not None:
            self._editor.load_text(text)
            self._editor.selection = Selection.cursor((0, 0))
        self._refresh_title()

    def action_speak_paragraph(self) -> None:
        snapshot = self._snapshot()
        if self.controller and snapshot is not None:
            self.controller.speak_paragraph(snapshot)

    def action_speak_all(self) -> None:
        snapshot = self._snapshot()
        if self.controller and snapshot is not None:
            self.controller.speak_all(snapshot)

    def action_stop_speech(self) -> None:
        if self.controller:
            self.controller.stop()

    def action_toggle_word_by_word(self) -> None:
        if self.controller:
            self.controller.toggle_word_by_word()

    def action_toggle_word_wrap(self) -> None:
        if self.controller and self._editor is not None:
            self._editor.soft_wrap = self.controller.toggle_word_wrap()

    def action_choose_voice(self) -> None:
        if self._sink is None:
            self._update_status("speech unavailable")
            return
        voices = self._sink.voices()
        if not voices:
            self._update_status("no voices installed")
            return

        def chosen(name: str | None) -> None:
            if name and self.controller:
                self.controller.select_voice(name)

        self.push_screen(VoiceScreen(voices, self.settings.voice_name), chosen)

    def action_zoom_in(self) -> None:
        if self.controller:
            self.controller.zoom(StepDirection.LARGER)

    def action_zoom_out(self) -> None:
        if self.controller:
            self.controller.zoom(StepDirection.SMALLER)

    def action_new(self) -> None:
        def start_new() -> None:
            self._load(self.document.new())
            self._update_status("new document")

        self._guard_unsaved(start_new)

    def action_open(self) -> None:
        def opened(value: str | None) -> None:
            if not value:
                return
            try:
                text = self.document.open(Path(value).expanduser())
            except DocumentError as exc:
                self._update_status(str(exc))
                return
            self._load(text)
            self._update_status(f"opened {self.document.path}")

        def ask() -> None:
            self.push_screen(PathScreen("Open file"), opened)

        self._guard_unsaved(ask)

    def action_save(self) -> None:
        if self.document.path is None:
            self.action_save_as()
            return
        self._write(self.document.path)

    def action_save_as(self) -> None:
        def chosen(value: str | None) -> None:
            if not value:
                return
            target = Path(value).expanduser()
            if target.exists() and target != self.document.path:

                def replace(confirmed: bool | None) -> None:
                    if confirmed:
                        self._write(target)

                self.push_screen(
                    ConfirmScreen(f"{target} already exists. Replace it?"), replace
                )
                return
            self._write(target)

        initial = str(self.document.path) if self.document.path else ""
        self.push_screen(PathScreen("Save as", initial), chosen)

    def _write(self, target: Path) -> None:
        if self._editor is None:
            return
        try:
            saved = self.document.save_as(self._editor.text, target)
        except DocumentError as exc:
            self._update_status(str(exc))
            return
        self._refresh_title()
        self._update_status(f"saved {saved}")

    def action_request_quit(self) -> None:
        self._guard_unsaved(self.exit)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the speaking notepad.")
    parser.add_argument("path", nargs="?", type=Path, help="Text file to edit")
    parser.add_argument(
        "--settings",
        type=Path,
        default=Path(
            os.environ.get("SPEECH_NOTEPAD_SETTINGS", str(DEFAULT_SETTINGS_PATH))
        ),
        help="Settings JSON file (default: ~/.speech_notepad/settings.json)",
    )
    parser.add_argument(
        "--no-speech",
        action="store_true",
        help="Do not start the speech engine",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    try:
        app = SpeechNotepadApp(
            path=args.path, settings_path=args.settings, speech=not args.no_speech
        )
    except SettingsError as exc:
        raise SystemExit(f"Cannot read settings {exc.path}: {exc}") from exc
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
