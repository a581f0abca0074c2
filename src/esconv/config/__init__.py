"""Runtime configuration for esconv."""

from .settings import Settings, settings  # noqa: F401
