"""Modal prompts used by the Textual notepad."""

from __future__ import annotations

from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual.app import ComposeResult
    from textual.containers import Horizontal, Vertical
    from textual.screen import ModalScreen
    from textual.widgets import Button, Input, Label, OptionList
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use speech_notepad.adapters.textual"
    ) from exc

DIALOG_CSS = """
	ModalScreen {
		align: center middle;
	}

	#dialog {
		width: 60;
		height: auto;
		max-height: 80%;
		border: thick $primary;
		background: $surface;
		padding: 1 2;
	}

	#buttons {
		height: auto;
		align-horizontal: right;
	}
	"""


class ConfirmScreen(ModalScreen[bool]):
    """OK/Cancel question; dismisses with ``True`` only on OK."""

    DEFAULT_CSS = DIALOG_CSS
    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, question: str) -> None:
        super().__init__()
        self.question = question

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Label(self.question)
            with Horizontal(id="buttons"):
                yield Button("OK", id="ok", variant="warning")
                yield Button("Cancel", id="cancel")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "ok")

    def action_cancel(self) -> None:
        self.dismiss(False)


class PathScreen(ModalScreen[Optional[str]]):
    """Asks for a file path; dismisses with ``None`` when cancelled."""

    DEFAULT_CSS = DIALOG_CSS
    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, prompt: str, initial: str = "") -> None:
        super().__init__()
        self.prompt = prompt
        self.initial = initial

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Label(self.prompt)
            yield Input(value=self.initial, placeholder="notes.txt", id="path")

    def on_mount(self) -> None:
        self.query_one(Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        value = event.value.strip()
        self.dismiss(value or None)

    def action_cancel(self) -> None:
        self.dismiss(None)


class VoiceScreen(ModalScreen[Optional[str]]):
    """Lists the installed voices; dismisses with the chosen name."""

    DEFAULT_CSS = DIALOG_CSS
    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, voices: Sequence[str], current: str = "") -> None:
        super().__init__()
        self.voices = list(voices)
        self.current = current

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Label("Voice")
            yield OptionList(*self.voices, id="voices")

    def on_mount(self) -> None:
        options = self.query_one(OptionList)
        if self.current in self.voices:
            options.highlighted = self.voices.index(self.current)
        options.focus()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.dismiss(self.voices[event.option_index])

    def action_cancel(self) -> None:
        self.dismiss(None)


__all__ = ["ConfirmScreen", "PathScreen", "VoiceScreen"]
