"""Host-side utilities for graph processing: integer helpers, statistics, flag sets, bit matrices, printing, timers, array helpers and edge batch generation."""

__version__ = "0.1.0"