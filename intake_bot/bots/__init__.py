"""Bot feature packages."""

from .applications import register_handlers as register_application_handlers

__all__ = ["register_application_handlers"]
