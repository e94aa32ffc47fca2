"""Speech sinks for the notepad host."""

from .pyttsx import PyttsxSpeechSink

__all__ = ["PyttsxSpeechSink"]
