"""
Colony

Cross-tick bookkeeping helpers for an autonomous agent living in a tick-based grid world.
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
