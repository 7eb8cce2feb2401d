"""Ingestion layer.

This package contains the sources that produce telemetry (the simulator)
and the helpers that normalize values received from external providers.
"""

__all__: list[str] = []
