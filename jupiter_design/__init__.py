"""Immutable builders that turn design-system tokens into Tailwind CSS class strings."""

__version__ = "0.1.0"