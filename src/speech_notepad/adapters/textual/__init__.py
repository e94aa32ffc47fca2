"""Textual host for the speaking notepad."""
