"""Host-side controller wiring the engine to editor events."""

from .dictation import DictationController, DictationHooks
from .document import DocumentError, DocumentSession
from .events import KeyInput

__all__ = [
    "DictationController",
    "DictationHooks",
    "DocumentError",
    "DocumentSession",
    "KeyInput",
]
