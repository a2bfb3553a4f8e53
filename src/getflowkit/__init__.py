"""getflowkit: Result-based error handling and Korean-locale validators."""

from __future__ import annotations

__version__ = "0.1.0"
