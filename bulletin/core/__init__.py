"""Core app configuration, errors and security primitives."""

from bulletin.core.config import get_settings, settings

__all__ = ["get_settings", "settings"]
