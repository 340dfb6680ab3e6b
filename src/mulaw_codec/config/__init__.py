"""Configuration utilities for the μ-law codec tooling."""

from .settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
