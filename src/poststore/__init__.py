"""poststore: Read-only document store for Jekyll-style essay collections."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
