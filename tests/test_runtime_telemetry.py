from __future__ import annotations

import pytest

from speech_notepad.runtime import telemetry


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_get_logger_is_cached() -> None:
    first = telemetry.get_logger("speech_notepad.tests")

    assert telemetry.get_logger("speech_notepad.tests") is first


def test_span_records_metadata_and_reraises() -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span(
            "tests::span", component=True, metadata={"offset": 3}
        ) as handle:
            handle.add_metadata("span", (0, 3))
            assert handle.metadata == {"offset": "3", "span": "(0, 3)"}
            raise RuntimeError("boom")


def test_public_surface_has_no_module_logger() -> None:
    assert "logger" not in telemetry.__all__
    assert not hasattr(telemetry, "logger")
    assert not hasattr(telemetry.SpanHandle, "cancel")
