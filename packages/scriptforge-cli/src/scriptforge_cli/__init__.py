"""scriptforge-cli: Command-line interface for scriptforge."""

from __future__ import annotations

__version__ = "0.1.0"
