"""strictversions: Build-time consistency checking for interdependent library versions."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "Apache-2.0"
