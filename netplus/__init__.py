"""
NetPlus Host Telemetry Collector
Point-in-time network and security snapshots of a macOS host.
"""

__version__ = "1.0.0"
