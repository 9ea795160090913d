from __future__ import annotations


class InvalidConfiguration(ValueError):
    """Raised when an identifier configuration cannot be honoured."""
