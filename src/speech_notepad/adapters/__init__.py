"""Host adapters (Textual UI, speech backends)."""
