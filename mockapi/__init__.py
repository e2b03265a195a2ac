"""Mock HTTP API for local frontend development."""

__version__ = "0.1.0"
