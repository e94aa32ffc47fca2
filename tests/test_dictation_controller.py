from __future__ import annotations

from typing import List, Tuple

import pytest

from speech_notepad.buffer import TextSnapshot
from speech_notepad.fonts import FontScale, FontStepper, StepDirection, StepStatus
from speech_notepad.host import DictationController, DictationHooks, KeyInput
from speech_notepad.segments import Span
from speech_notepad.settings import EditorSettings


def make_controller(
    *, settings: EditorSettings | None = None
) -> Tuple[DictationController, dict]:
    captured: dict = {
        "spoken": [],
        "selected": [],
        "sizes": [],
        "voices": [],
        "statuses": [],
        "logs": [],
        "cancels": 0,
    }

    def cancel() -> None:
        captured["cancels"] += 1

    hooks = DictationHooks(
        speak=lambda text: captured["spoken"].append(text),
        cancel_speech=cancel,
        select=lambda span: captured["selected"].append(span),
        apply_font_size=lambda size: captured["sizes"].append(size),
        set_voice=lambda name: captured["voices"].append(name),
        update_status=lambda status: captured["statuses"].append(status),
        log=lambda line: captured["logs"].append(line),
    )
    stepper = FontStepper(scale=FontScale.of([8, 9, 10, 12]), cooldown=0.1)
    controller = DictationController(hooks, settings=settings, stepper=stepper)
    return controller, captured


def test_space_after_sentence_speaks_sentence() -> None:
    controller, captured = make_controller()

    span = controller.handle_key(
        KeyInput.from_host("space"), TextSnapshot.at("Hello world.", 12)
    )

    assert span == Span(0, 12)
    assert captured["spoken"] == ["Hello world."]


def test_enter_after_word_speaks_word() -> None:
    controller, captured = make_controller()

    controller.handle_key(KeyInput.from_host("enter"), TextSnapshot.at("say cat", 7))

    assert captured["spoken"] == ["cat"]


def test_non_boundary_key_is_ignored() -> None:
    controller, captured = make_controller()

    span = controller.handle_key(
        KeyInput.from_host("a", text="a"), TextSnapshot.at("cat", 3)
    )

    assert span.is_empty
    assert captured["spoken"] == []


def test_chorded_boundary_key_is_ignored() -> None:
    controller, captured = make_controller()

    controller.handle_key(
        KeyInput.from_host("space", modifiers=("ctrl",)), TextSnapshot.at("cat", 3)
    )

    assert captured["spoken"] == []


def test_word_by_word_off_stays_silent() -> None:
    controller, captured = make_controller(settings=EditorSettings(word_by_word=False))

    controller.handle_key(KeyInput.from_host("space"), TextSnapshot.at("cat", 3))

    assert captured["spoken"] == []


def test_bare_line_break_speaks_nothing() -> None:
    controller, captured = make_controller()

    controller.handle_key(KeyInput.from_host("enter"), TextSnapshot.at("cat\n", 4))

    assert captured["spoken"] == []


def test_speak_paragraph_selects_sentence_at_caret() -> None:
    controller, captured = make_controller()
    text = "Hello world. How are you?"

    span = controller.speak_paragraph(TextSnapshot.at(text, 15))

    assert captured["selected"] == [Span(13, 12)]
    assert captured["spoken"] == ["How are you?"]
    assert span == Span(13, 12)


def test_speak_paragraph_speaks_existing_selection() -> None:
    controller, captured = make_controller()

    controller.speak_paragraph(TextSnapshot.at("Hello world. How are you?", 0, 5))

    assert captured["selected"] == []
    assert captured["spoken"] == ["Hello"]


def test_speak_paragraph_clamps_overflowing_selection() -> None:
    controller, captured = make_controller()

    span = controller.speak_paragraph(TextSnapshot.at("abc", 1, 99))

    assert span == Span(1, 2)
    assert captured["spoken"] == ["bc"]


def test_speak_all_skips_blank_buffer() -> None:
    controller, captured = make_controller()

    controller.speak_all(TextSnapshot.at("  \n", 0))
    controller.speak_all(TextSnapshot.at("One. Two.", 0))

    assert captured["spoken"] == ["One. Two."]


def test_stop_cancels_speech() -> None:
    controller, captured = make_controller()

    controller.stop()

    assert captured["cancels"] == 1
    assert "speech stopped" in captured["statuses"]


def test_zoom_applies_only_on_step() -> None:
    controller, captured = make_controller()

    at_top = controller.zoom(StepDirection.LARGER, now=1.0)
    applied = controller.zoom(StepDirection.SMALLER, now=1.0)
    throttled = controller.zoom(StepDirection.SMALLER, now=1.05)

    assert at_top.status is StepStatus.UNCHANGED
    assert applied.status is StepStatus.APPLIED
    assert throttled.status is StepStatus.REJECTED
    assert captured["sizes"] == [10]
    assert controller.settings.font_size == 10
    assert "font 10pt" in captured["statuses"]


def test_zoom_uses_explicit_current_size() -> None:
    controller, captured = make_controller()

    controller.zoom(StepDirection.LARGER, current_size=8, now=1.0)

    assert captured["sizes"] == [9]


def test_toggles_flip_settings() -> None:
    controller, captured = make_controller()

    assert controller.toggle_word_by_word() is False
    assert controller.toggle_word_wrap() is True
    assert captured["statuses"] == ["word-by-word off", "word wrap on"]


def test_select_voice_updates_settings() -> None:
    controller, _ = make_controller()

    controller.select_voice("Haruka")

    assert controller.settings.voice_name == "Haruka"


def test_select_voice_reaches_speech_backend() -> None:
    controller, captured = make_controller()

    controller.select_voice("Haruka")
    controller.select_voice("Zira")

    assert captured["voices"] == ["Haruka", "Zira"]
    assert captured["statuses"][-1] == "voice: Zira"


def test_text_snapshot_is_hashable_value() -> None:
    first = TextSnapshot.at("abc", 1, 1)
    second = TextSnapshot.at("abc", 1, 1)

    assert first == second
    assert hash(first) == hash(second)
    assert not hasattr(first, "attributes")


def test_key_handling_emits_log_lines() -> None:
    controller, captured = make_controller()

    controller.handle_key(KeyInput.from_host("space"), TextSnapshot.at("cat", 3))

    logs: List[str] = captured["logs"]
    assert any(line.startswith("key ->") for line in logs)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("space", "SPACE"),
        (" ", "SPACE"),
        ("enter", "ENTER"),
        ("return", "ENTER"),
        ("tab", "TAB"),
        ("a", "a"),
    ],
)
def test_key_input_normalization(raw: str, expected: str) -> None:
    assert KeyInput.from_host(raw).key == expected


def test_key_input_token_includes_modifiers() -> None:
    key = KeyInput.from_host("space", modifiers=("ctrl", "shift"))

    assert key.token == "CTRL+SHIFT+SPACE"
