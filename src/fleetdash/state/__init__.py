"""State layer.

This package is the single source of truth for the fleet's current
telemetry (the registry) and the live speed alert (the monitor).
"""
