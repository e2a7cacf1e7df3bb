"""ProNet - in-process engine for a professional networking demo app."""

__version__ = "0.1.0"
