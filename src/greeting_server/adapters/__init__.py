"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.http` - Catch-all greeting listener on http.server
    * :mod:`.config` - Configuration loading and display
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.cli` - Click CLI framework integration
    * :mod:`.memory` - In-memory port implementations for tests
"""

from __future__ import annotations

__all__: list[str] = []
