"""Backend service for a project management and collaboration platform."""

__version__ = "0.1.0"