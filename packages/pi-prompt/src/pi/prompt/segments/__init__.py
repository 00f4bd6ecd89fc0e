"""Prompt segments."""

from pi.prompt.segments.python import PythonSegment

__all__ = [
    "PythonSegment",
]
