"""Code Guardian: client for a remote rule-based code security scanner."""

__version__ = "0.1.0"
