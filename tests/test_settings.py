from __future__ import annotations

import json
from pathlib import Path

import pytest

from speech_notepad.settings import EditorSettings, FontDescriptor, SettingsError


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    settings = EditorSettings.load(tmp_path / "absent.json")

    assert settings == EditorSettings()
    assert settings.word_by_word is True
    assert settings.font_size == 12.0


def test_saved_settings_load_back(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "settings.json"
    original = EditorSettings(
        word_wrap=True,
        word_by_word=False,
        voice_name="Microsoft Haruka",
        font=FontDescriptor("Meiryo UI", 10.5),
    )

    original.save(path)

    assert EditorSettings.load(path) == original


def test_document_uses_stable_field_names(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    EditorSettings(font=FontDescriptor("Consolas", 14)).save(path)

    document = json.loads(path.read_text(encoding="utf-8"))

    assert document == {
        "EnableWordWrap": False,
        "EnableWordByWord": True,
        "VoiceName": "",
        "FontString": "Consolas, 14pt",
    }


def test_partial_document_falls_back_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text('{"VoiceName": "Zira"}', encoding="utf-8")

    settings = EditorSettings.load(path)

    assert settings.voice_name == "Zira"
    assert settings.word_by_word is True
    assert settings.font is None


def test_invalid_json_raises_settings_error(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SettingsError) as info:
        EditorSettings.load(path)

    assert info.value.path == path


def test_non_object_document_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(SettingsError):
        EditorSettings.load(path)


def test_malformed_font_string_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text('{"FontString": "twelve points"}', encoding="utf-8")

    with pytest.raises(SettingsError) as info:
        EditorSettings.load(path)

    assert info.value.path == path


def test_font_descriptor_parse() -> None:
    font = FontDescriptor.parse("Meiryo UI, 10.5pt")

    assert font == FontDescriptor("Meiryo UI", 10.5)
    assert font.to_string() == "Meiryo UI, 10.5pt"
    assert FontDescriptor("Consolas", 12.0).to_string() == "Consolas, 12pt"


def test_set_font_size_without_font_uses_default_family() -> None:
    settings = EditorSettings()

    settings.set_font_size(16)

    assert settings.font == FontDescriptor("Consolas", 16)


def test_clear_restores_defaults() -> None:
    settings = EditorSettings(word_wrap=True, voice_name="x", font=FontDescriptor())

    settings.clear()

    assert settings == EditorSettings()
