"""Assemble per-target ouch build artifacts into release archives."""

__version__ = "0.1.0"
