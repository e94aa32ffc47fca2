"""SpeechSink backed by pyttsx3, running the engine on a worker thread."""

from __future__ import annotations

import queue
import threading
import time
from contextlib import suppress
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from speech_notepad.buffer import SpeechUnavailableError
from speech_notepad.runtime import telemetry

DEFAULT_RATE = 180
_IDLE_SLEEP_S = 0.01
_JOIN_TIMEOUT_S = 2.0


def _pyttsx3_engine() -> Any:
    import pyttsx3

    return pyttsx3.init()


@dataclass(slots=True)
class _Command:
    kind: str
    payload: Optional[str] = None


class PyttsxSpeechSink:
    """Queue-fed pyttsx3 engine with a persistent non-blocking event loop.

    The engine is created and used only on the worker thread; the public
    methods just enqueue commands, so they are safe to call from the UI
    thread. Once the worker dies every call raises
    :class:`SpeechUnavailableError` until :meth:`start` succeeds again.

    ``engine_factory`` builds the engine on the worker thread; it defaults to
    ``pyttsx3.init``.
    """

    def __init__(
        self,
        *,
        rate: int = DEFAULT_RATE,
        voice_name: str = "",
        engine_factory: Optional[Callable[[], Any]] = None,
    ) -> None:
        self.rate = rate
        self.voice_name = voice_name
        self.logger = telemetry.get_logger("speech_notepad.speech")
        self._engine_factory = engine_factory or _pyttsx3_engine
        self._queue: "queue.Queue[_Command | None]" = queue.Queue()
        self._ready = threading.Event()
        self._voices: List[str] = []
        self._error: Optional[BaseException] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._error is None

    @property
    def error(self) -> Optional[BaseException]:
        return self._error

    def start(self, *, timeout: float = 5.0) -> None:
        if self.running:
            return
        self._error = None
        self._ready.clear()
        thread = threading.Thread(target=self._run, name="pyttsx-speech", daemon=True)
        self._thread = thread
        thread.start()
        if not self._ready.wait(timeout):
            self._abandon(thread)
            raise SpeechUnavailableError("pyttsx3 did not start", backend="pyttsx3")
        if self._error is not None:
            error = self._error
            self._abandon(thread)
            raise SpeechUnavailableError(
                f"pyttsx3 failed to start: {error}", backend="pyttsx3"
            ) from error

    def speak(self, text: str) -> None:
        self._check()
        if text.strip():
            self._queue.put(_Command("say", text))

    def cancel(self) -> None:
        self._check()
        self._drain()
        self._queue.put(_Command("stop"))

    def set_voice(self, name: str) -> None:
        self._check()
        self.voice_name = name
        self._queue.put(_Command("voice", name))

    def voices(self) -> List[str]:
        return list(self._voices)

    def pending(self) -> int:
        """Number of commands queued for the worker."""

        return self._queue.qsize()

    def close(self) -> None:
        thread = self._thread
        if thread is None:
            return
        self._drain()
        self._queue.put(None)
        thread.join(timeout=_JOIN_TIMEOUT_S)
        self._thread = None

    def _check(self) -> None:
        if self._error is not None:
            raise SpeechUnavailableError(
                f"pyttsx3 stopped: {self._error}", backend="pyttsx3"
            ) from self._error

    def _abandon(self, thread: threading.Thread) -> None:
        thread.join(timeout=_JOIN_TIMEOUT_S)
        self._thread = None
        self._drain()

    def _fail(self, exc: BaseException) -> None:
        self._drain()
        self._error = exc
        telemetry.record_event(
            "speech.failed",
            level="error",
            data={"backend": "pyttsx3", "error": repr(exc)},
            logger_name="speech_notepad.speech",
        )

    def _drain(self) -> None:
        while True:
            try:
                self._queue.get_nowait()
            except queue.Empty:
                return

    def _run(self) -> None:
        try:
            engine = self._engine_factory()
            engine.setProperty("rate", self.rate)
            self._voices = [voice.name for voice in engine.getProperty("voices")]
            if self.voice_name:
                self._apply_voice(engine, self.voice_name)
            engine.startLoop(False)
        except Exception as exc:
            self._fail(exc)
            self._ready.set()
            return

        self._ready.set()
        self.logger.info(f"pyttsx3 ready rate={self.rate} voices={len(self._voices)}")
        try:
            while True:
                engine.iterate()
                try:
                    command = self._queue.get_nowait()
                except queue.Empty:
                    time.sleep(_IDLE_SLEEP_S)
                    continue
                if command is None:
                    break
                self._dispatch(engine, command)
        except Exception as exc:
            self._fail(exc)
        finally:
            # The loop may already be torn down by the failure.
            with suppress(Exception):
                engine.endLoop()

    def _dispatch(self, engine: Any, command: _Command) -> None:
        if command.kind == "say" and command.payload:
            engine.say(command.payload)
        elif command.kind == "stop":
            engine.stop()
        elif command.kind == "voice" and command.payload:
            self._apply_voice(engine, command.payload)

    def _apply_voice(self, engine: Any, name: str) -> None:
        for voice in engine.getProperty("voices"):
            if voice.name == name:
                engine.setProperty("voice", voice.id)
                return
        self.logger.warning(f"voice not found: {name}")


__all__ = ["PyttsxSpeechSink"]
