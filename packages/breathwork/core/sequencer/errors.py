"""Sequencer errors."""

from __future__ import annotations


class InvalidConfigError(ValueError):
    """Raised when a sequencer configuration is rejected.

    Attributes:
        fields: Names of the offending configuration fields
    """

    def __init__(self, message: str, fields: list[str] | None = None):
        super().__init__(message)
        self.fields = fields or []
